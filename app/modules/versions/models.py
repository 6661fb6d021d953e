# Supabase table: prompt_versions
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

prompt_versions:
- id: uuid (primary key)
- prompt_id: uuid (foreign key to prompts.id, on delete cascade)
- title: text (not null)
- body_md: text (not null)
- created_by: uuid (foreign key to auth.users.id, not null)
- created_at: timestamptz (default: now())
- change_note: text (nullable)

Append-only: the application inserts and reads, never updates or deletes.
"""
