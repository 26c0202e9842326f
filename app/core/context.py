"""
Per-request context: cookie jar, Supabase client and the admin session gate.

SupabaseContextMiddleware must wrap AdminGateMiddleware so the gate finds the
client on request.state and redirect responses still carry refreshed cookies.
"""

import logging
from functools import partial

from starlette.concurrency import run_in_threadpool
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.config import Settings
from app.core.navigation import RedirectTo
from app.database.cookies import RequestCookies
from app.database.supabase_client import RequestClient, create_request_client
from app.modules.admin.gate import is_protected_path, load_admin_layout
from app.modules.auth.service import AuthService

logger = logging.getLogger(__name__)

# Storage-layer headers that must not reach the browser
SUPPRESSED_RESPONSE_HEADERS = {b"content-range"}


class SupabaseContextMiddleware:
    def __init__(self, app: ASGIApp, settings: Settings):
        self.app = app
        self.settings = settings

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cookies = RequestCookies.from_scope(scope)
        state = scope.setdefault("state", {})
        state["cookies"] = cookies
        state["supabase"] = RequestClient(partial(create_request_client, cookies, self.settings))

        async def send_with_cookies(message: Message):
            if message["type"] == "http.response.start":
                cookies.freeze()
                headers = [
                    (name, value)
                    for name, value in message.get("headers", [])
                    if name.lower() not in SUPPRESSED_RESPONSE_HEADERS
                ]
                headers.extend(cookies.set_cookie_headers())
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_with_cookies)


class AdminGateMiddleware:
    def __init__(self, app: ASGIApp, settings: Settings):
        self.app = app
        self.settings = settings

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http" or not is_protected_path(scope["path"], self.settings.admin_path):
            await self.app(scope, receive, send)
            return

        state = scope["state"]
        decision = await run_in_threadpool(
            load_admin_layout,
            AuthService(state["supabase"].get_client()),
            scope["path"],
            self.settings.login_path,
        )
        if isinstance(decision, RedirectTo):
            logger.debug(f"No session for {scope['path']}, redirecting to {decision.location}")
            response = decision.to_response()
            await response(scope, receive, send)
            return

        state["session"] = decision.data.get("session")
        await self.app(scope, receive, send)
