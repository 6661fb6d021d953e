# Supabase table: prompts
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

prompts:
- id: uuid (primary key)
- team_id: uuid (foreign key to teams.id, on delete cascade)
- folder_id: uuid (nullable, foreign key to folders.id, on delete set null)
- owner_id: uuid (foreign key to auth.users.id, not null)
- title: text (not null)
- body_md: text (not null, default: '')
- visibility: text (not null, default: 'private') - values: private, team, public
- public_slug: text (nullable, unique)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())
- check (public_slug is not null) = (visibility = 'public')

Deleting a prompt cascades to prompt_tags, prompt_versions and shares.
"""
