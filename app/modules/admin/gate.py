"""
Session gate for the admin section.

Every path under the admin prefix needs a session, except the login page,
which must stay reachable so a signed-out admin can sign in. There are no
roles: a session is enough.
"""

from typing import Any, Optional

from app.core.navigation import Continue, Decision, RedirectTo
from app.modules.auth.service import AuthService


def is_protected_path(path: str, admin_path: str) -> bool:
    prefix = admin_path.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def is_login_path(path: str, login_path: str) -> bool:
    login_path = login_path.rstrip("/")
    return path.rstrip("/") == login_path or path.startswith(login_path + "/")


def evaluate_session_gate(session: Optional[Any], path: str, login_path: str) -> Decision:
    if not session and not is_login_path(path, login_path):
        return RedirectTo(login_path)
    return Continue({"session": session})


def load_admin_layout(auth_service: AuthService, path: str, login_path: str) -> Decision:
    """Fetch the session and decide. Session lookup errors propagate."""
    session = auth_service.get_session()
    return evaluate_session_gate(session, path, login_path)
