# Supabase table: shares
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

shares:
- id: uuid (primary key)
- prompt_id: uuid (foreign key to prompts.id, on delete cascade)
- target_user: uuid (foreign key to auth.users.id, not null)
- permission: text (not null) - values: view, edit
- created_at: timestamptz (default: now())

A share is an explicit per-user grant, independent of team membership and
of the prompt's visibility.
"""
