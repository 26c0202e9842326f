# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - OAuth sign-in with PKCE (code verifier kept in a cookie)
# - Code-for-session exchange on the callback leg
# - Session refresh (access + refresh token pair)

"""
Supabase Auth calls used by this backend:
- auth.sign_in_with_oauth() - Build the provider URL and store the PKCE verifier
- auth.exchange_code_for_session() - Turn the one-time code into a session
- auth.get_session() - Read (and refresh if expired) the session from cookies
- auth.sign_out() - Revoke the session and clear the cookies

Sessions are persisted in HTTP cookies through CookieStorage
(app/database/supabase_client.py); the cookie names and format belong to
Supabase Auth and are treated as opaque.
"""
