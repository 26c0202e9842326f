import base64
import binascii
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from fastapi import Request
from supabase import Client, ClientOptions, create_client
from supabase_auth import SyncSupportedStorage

from app.config import Settings, get_settings
from app.database.cookies import CookieWriteError, RequestCookies

logger = logging.getLogger(__name__)

# Browsers drop cookies above ~4KB; session values are split below that.
MAX_CHUNK_SIZE = 3180
BASE64_PREFIX = "base64-"


class CookieMethods:
    """getAll/setAll pair over the request cookie jar, used for session persistence."""

    def __init__(self, cookies: RequestCookies):
        self.cookies = cookies

    def get_all(self) -> List[Dict[str, str]]:
        return self.cookies.get_all()

    def set_all(self, cookies_to_set: Iterable[Mapping[str, Any]]) -> None:
        try:
            for cookie in cookies_to_set:
                options = dict(cookie.get("options") or {})
                options["path"] = options.get("path") or "/"
                self.cookies.set(cookie["name"], cookie["value"], options)
        except CookieWriteError as e:
            # The response already went out; a session refresh that ran earlier
            # in this request has persisted the cookies.
            logger.debug(f"Ignoring session cookie write: {e}")


class CookieStorage(SyncSupportedStorage):
    """Supabase Auth storage backed by HTTP cookies.

    Values are base64 encoded so serialized sessions are valid cookie values,
    and split into ``<key>.0``, ``<key>.1``, ... when they exceed MAX_CHUNK_SIZE.
    """

    def __init__(self, methods: CookieMethods, cookie_options: Optional[Dict[str, Any]] = None):
        self.methods = methods
        self.cookie_options = dict(cookie_options or {})

    def _cookies(self) -> Dict[str, str]:
        return {c["name"]: c["value"] for c in self.methods.get_all()}

    def _names_for(self, key: str, cookies: Dict[str, str]) -> List[str]:
        chunk_name = re.compile(rf"^{re.escape(key)}\.\d+$")
        return [name for name in cookies if name == key or chunk_name.match(name)]

    def get_item(self, key: str) -> Optional[str]:
        cookies = self._cookies()
        if key in cookies:
            raw = cookies[key]
        else:
            parts = []
            index = 0
            while f"{key}.{index}" in cookies:
                parts.append(cookies[f"{key}.{index}"])
                index += 1
            if not parts:
                return None
            raw = "".join(parts)
        return decode_cookie_value(raw)

    def set_item(self, key: str, value: str) -> None:
        encoded = encode_cookie_value(value)
        existing = self._names_for(key, self._cookies())

        if len(encoded) <= MAX_CHUNK_SIZE:
            to_set = [{"name": key, "value": encoded, "options": dict(self.cookie_options)}]
        else:
            to_set = [
                {"name": f"{key}.{i}", "value": encoded[start:start + MAX_CHUNK_SIZE], "options": dict(self.cookie_options)}
                for i, start in enumerate(range(0, len(encoded), MAX_CHUNK_SIZE))
            ]

        written = {c["name"] for c in to_set}
        to_set.extend(_expired(name) for name in existing if name not in written)
        self.methods.set_all(to_set)

    def remove_item(self, key: str) -> None:
        names = self._names_for(key, self._cookies())
        if names:
            self.methods.set_all([_expired(name) for name in names])


def _expired(name: str) -> Dict[str, Any]:
    return {"name": name, "value": "", "options": {"max_age": 0, "expires": 0}}


def encode_cookie_value(value: str) -> str:
    encoded = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")
    return BASE64_PREFIX + encoded


def decode_cookie_value(raw: str) -> Optional[str]:
    """Decode a stored value; values without the base64 prefix are returned as-is."""
    if not raw.startswith(BASE64_PREFIX):
        return raw
    payload = raw[len(BASE64_PREFIX):]
    try:
        return base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        logger.debug("Discarding undecodable auth cookie")
        return None


def create_request_client(cookies: RequestCookies, settings: Optional[Settings] = None) -> Client:
    """Build a Supabase client whose auth session lives in this request's cookies.

    Construction is local; network calls happen when the client is used.
    """
    settings = settings or get_settings()
    storage = CookieStorage(
        CookieMethods(cookies),
        cookie_options={
            "samesite": "lax",
            "httponly": True,
            "secure": settings.cookie_secure,
            "max_age": settings.cookie_max_age,
        },
    )
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(
            storage=storage,
            flow_type="pkce",
            persist_session=True,
            auto_refresh_token=False,
        ),
    )


class RequestClient:
    """Per-request Supabase client, created on first use.

    Requests that never touch the backend (health probes, CORS preflights)
    do not depend on the Supabase settings being present.
    """

    def __init__(self, factory: Callable[[], Client]):
        self._factory = factory
        self._client: Optional[Client] = None

    def get_client(self) -> Client:
        if self._client is None:
            self._client = self._factory()
        return self._client


def get_supabase(request: Request) -> Client:
    """Request-scoped client attached by SupabaseContextMiddleware."""
    return request.state.supabase.get_client()


def get_request_cookies(request: Request) -> RequestCookies:
    return request.state.cookies
