# Supabase table: folders
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

folders:
- id: uuid (primary key)
- team_id: uuid (foreign key to teams.id, on delete cascade)
- parent_id: uuid (nullable, foreign key to folders.id, on delete restrict)
- name: text (not null)
- created_by: uuid (foreign key to auth.users.id, not null)
- created_at: timestamptz (default: now())

A null parent_id is a root folder. Deleting a folder that still has children is
rejected by the store (23503) and surfaces as Conflict; prompts pointing at a
deleted folder fall back to the team root (prompts.folder_id on delete set null).
"""
