import logging
from typing import Any, Optional
from urllib.parse import urlencode, urlsplit

from supabase import Client
from supabase_auth.errors import AuthError

from app.config import Settings
from app.core.navigation import RedirectTo

logger = logging.getLogger(__name__)

# Browsers read these as part of a host or strip them before resolving
UNSAFE_REDIRECT_CHARS = frozenset("\\" + "".join(chr(c) for c in range(0x20)) + "\x7f")
MAX_INAPP_REDIRECT_LEN = 256


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_session(self) -> Optional[Any]:
        """Current session from the request cookies, refreshed if expired.

        Backend failures are not caught here.
        """
        return self.supabase.auth.get_session()

    def exchange_code_for_session(self, code: str) -> bool:
        """Exchange a one-time OAuth code for a session. Returns False on any auth error."""
        try:
            self.supabase.auth.exchange_code_for_session({"auth_code": code})
            return True
        except AuthError as e:
            logger.info(f"Code exchange failed: {e}")
            return False

    def sign_in_with_oauth(self, provider: str, redirect_to: str) -> Optional[str]:
        """Start the OAuth flow; returns the provider URL or None."""
        try:
            response = self.supabase.auth.sign_in_with_oauth({
                "provider": provider,
                "options": {"redirect_to": redirect_to},
            })
            return response.url
        except AuthError as e:
            logger.warning(f"OAuth sign-in with {provider} failed: {e}")
            return None

    def sign_out(self) -> bool:
        """Logout user using Supabase Auth"""
        try:
            self.supabase.auth.sign_out()
            return True
        except AuthError as e:
            logger.warning(f"Sign out failed: {e}")
            return False


def safe_next_path(next_path: Optional[str], default: str) -> str:
    """Return `next_path` if it stays on this site, else `default`.

    Query string and fragment are kept; scheme-relative (`//host`) and
    absolute URLs are refused.
    """
    if not next_path or len(next_path) > MAX_INAPP_REDIRECT_LEN:
        return default
    if any(c in UNSAFE_REDIRECT_CHARS for c in next_path):
        return default

    parts = urlsplit(next_path)
    if parts.scheme or parts.netloc:
        return default
    if not parts.path.startswith("/") or parts.path.startswith("//"):
        return default
    if ".." in parts.path.split("/"):
        return default
    return next_path


def resolve_oauth_callback(
    service: AuthService,
    code: Optional[str],
    next_path: Optional[str],
    settings: Settings,
) -> RedirectTo:
    """Callback leg of the OAuth handshake. Always ends in a redirect."""
    target = safe_next_path(next_path, settings.admin_home_path)
    if code and service.exchange_code_for_session(code):
        return RedirectTo(target)
    return RedirectTo(settings.login_path)


def start_oauth_login(
    service: AuthService,
    provider: str,
    next_path: Optional[str],
    settings: Settings,
) -> RedirectTo:
    provider = provider.lower()
    if provider not in settings.get_oauth_providers_list():
        logger.info(f"Rejected OAuth login with unknown provider: {provider}")
        return RedirectTo(settings.login_path)

    target = safe_next_path(next_path, settings.admin_home_path)
    redirect_to = f"{settings.public_base_url.rstrip('/')}/auth/callback?{urlencode({'next': target})}"
    url = service.sign_in_with_oauth(provider, redirect_to)
    if not url:
        return RedirectTo(settings.login_path)
    return RedirectTo(url)
