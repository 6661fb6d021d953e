# Supabase tables: tags, prompt_tags
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

tags:
- id: uuid (primary key)
- team_id: uuid (foreign key to teams.id, on delete cascade)
- name: text (not null)
- created_by: uuid (foreign key to auth.users.id, not null)
- created_at: timestamptz (default: now())
- unique constraint on (team_id, name)

prompt_tags:
- prompt_id: uuid (foreign key to prompts.id, on delete cascade)
- tag_id: uuid (foreign key to tags.id, on delete cascade)
- primary key (prompt_id, tag_id)
"""
