from fastapi import APIRouter, Depends, Request
from app.config import Settings, get_settings
from app.core.dependencies import get_auth_service
from app.core.limiter import limiter
from app.core.navigation import RedirectTo
from app.modules.auth.service import AuthService, resolve_oauth_callback, start_oauth_login
from typing import Optional

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/callback")
@limiter.limit(get_settings().auth_rate_limit)
def auth_callback(
    request: Request,
    code: Optional[str] = None,
    next: Optional[str] = None,
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """OAuth return leg: exchange the code, then redirect to `next` or back to login"""
    return resolve_oauth_callback(service, code, next, settings).to_response()


@router.get("/login")
@limiter.limit(get_settings().auth_rate_limit)
def auth_login(
    request: Request,
    provider: str,
    next: Optional[str] = None,
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """Start the OAuth flow with `provider` and redirect to it"""
    return start_oauth_login(service, provider, next, settings).to_response()


@router.post("/logout")
def logout(
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """Sign out and clear the session cookies"""
    service.sign_out()
    return RedirectTo(settings.login_path).to_response()
