# Supabase tables: teams, memberships
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

teams:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- owner_id: uuid (foreign key to auth.users.id, not null)
- created_at: timestamptz (default: now())

memberships:
- team_id: uuid (foreign key to teams.id, on delete cascade)
- user_id: uuid (foreign key to auth.users.id)
- role: text (not null) - values: owner, editor, viewer
- created_at: timestamptz (default: now())
- primary key (team_id, user_id)
"""
