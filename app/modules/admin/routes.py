from fastapi import APIRouter, Depends
from app.config import Settings, get_settings
from app.core.dependencies import get_session_info
from app.modules.admin.schemas import AdminHomeData, LoginPageData
from app.modules.auth.schemas import SessionInfo
from app.modules.schedules.routes import get_schedule_service
from app.modules.schedules.schemas import DAYS_OF_WEEK, DayInfo
from app.modules.schedules.service import ScheduleService
from typing import Optional

# Pages behind AdminGateMiddleware; the session is loaded before these run.
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("", response_model=AdminHomeData)
def admin_home(
    session: Optional[SessionInfo] = Depends(get_session_info),
    service: ScheduleService = Depends(get_schedule_service)
):
    """Landing page data: the weekly schedule grouped by day"""
    return AdminHomeData(
        session=session,
        days=[DayInfo(value=i, label=label) for i, label in enumerate(DAYS_OF_WEEK, start=1)],
        schedule=service.get_week(),
    )


@router.get("/login", response_model=LoginPageData)
def admin_login(
    session: Optional[SessionInfo] = Depends(get_session_info),
    settings: Settings = Depends(get_settings)
):
    """Login page data; reachable without a session"""
    return LoginPageData(session=session, providers=settings.get_oauth_providers_list())
