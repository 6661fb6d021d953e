# Supabase Auth
# No custom tables: Supabase Auth owns auth.users, sessions and JWT issuance.

"""
Supabase Auth provides:
- auth.sign_up() - Register new users
- auth.sign_in_with_password() - Authenticate users (the /signin entry point)
- auth.get_user() - Resolve the current user from a JWT
- auth.admin.sign_out(jwt) - Revoke the caller's session on logout

Every owner_id / created_by / user_id column in the other modules references
auth.users.id, and row-level security policies key on auth.uid().
"""
