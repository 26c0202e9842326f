"""
Request/response cookie jar.

One jar is created per HTTP request. Reads see the cookies sent by the browser
plus any writes queued during the request; writes are turned into Set-Cookie
headers when the response starts. Once the response has started the jar is
frozen and further writes raise CookieWriteError.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from starlette.requests import cookie_parser
from starlette.responses import Response


# Keyword arguments accepted by starlette's Response.set_cookie
COOKIE_OPTION_KEYS = ("max_age", "expires", "path", "domain", "secure", "httponly", "samesite")


class CookieWriteError(RuntimeError):
    """Raised when a cookie is written after the response headers were sent."""


class RequestCookies:
    def __init__(self, cookies: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(cookies or {})
        self._pending: Dict[str, Tuple[str, Dict[str, Any]]] = {}
        self._frozen = False

    @classmethod
    def from_scope(cls, scope: Mapping[str, Any]) -> "RequestCookies":
        """Build a jar from the Cookie header of an ASGI http scope."""
        cookie_header = ""
        for key, value in scope.get("headers", []):
            if key.lower() == b"cookie":
                cookie_header = value.decode("latin-1")
                break
        return cls(cookie_parser(cookie_header) if cookie_header else {})

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def get_all(self) -> List[Dict[str, str]]:
        return [{"name": name, "value": value} for name, value in self._values.items()]

    def get_options(self, name: str) -> Optional[Dict[str, Any]]:
        """Options of a queued write, or None if the cookie was not written."""
        pending = self._pending.get(name)
        return dict(pending[1]) if pending else None

    def set(self, name: str, value: str, options: Mapping[str, Any]) -> None:
        """Queue a cookie write. `options` must carry an explicit `path`."""
        if self._frozen:
            raise CookieWriteError(f"Cannot set cookie '{name}' after the response has started")
        if not options.get("path"):
            raise ValueError(f"Cookie '{name}' must be set with an explicit path")

        clean = {k: v for k, v in options.items() if k in COOKIE_OPTION_KEYS and v is not None}
        self._pending[name] = (value, clean)
        if clean.get("max_age") == 0:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def delete(self, name: str, path: str = "/") -> None:
        self.set(name, "", {"path": path, "max_age": 0, "expires": 0})

    def freeze(self) -> None:
        self._frozen = True

    def pending_names(self) -> List[str]:
        return list(self._pending)

    def set_cookie_headers(self) -> List[Tuple[bytes, bytes]]:
        """Raw Set-Cookie headers for every queued write."""
        if not self._pending:
            return []
        response = Response()
        for name, (value, options) in self._pending.items():
            response.set_cookie(key=name, value=value, **options)
        return [(k, v) for k, v in response.raw_headers if k == b"set-cookie"]
