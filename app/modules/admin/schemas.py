from pydantic import BaseModel
from typing import Dict, List, Optional
from app.modules.auth.schemas import SessionInfo
from app.modules.schedules.schemas import DayInfo, ScheduleWithCourseType


class LoginPageData(BaseModel):
    session: Optional[SessionInfo] = None
    providers: List[str] = []


class AdminHomeData(BaseModel):
    session: Optional[SessionInfo] = None
    days: List[DayInfo]
    schedule: Dict[int, List[ScheduleWithCourseType]]
