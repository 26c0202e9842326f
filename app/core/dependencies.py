"""
Core dependencies shared by the auth and admin routes
"""

from fastapi import Depends, Request
from app.database.supabase_client import get_supabase
from app.modules.auth.schemas import SessionInfo
from app.modules.auth.service import AuthService
from supabase import Client
from typing import Any, Optional


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_admin_session(request: Request) -> Optional[Any]:
    """Session loaded by the admin gate for this request (None on the login page)."""
    return getattr(request.state, "session", None)


def get_session_info(session: Optional[Any] = Depends(get_admin_session)) -> Optional[SessionInfo]:
    if session is None:
        return None
    return SessionInfo.from_session(session)
