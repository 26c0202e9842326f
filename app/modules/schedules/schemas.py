from pydantic import BaseModel, Field, model_validator
from typing import Literal, Optional
from datetime import datetime, time


DAYS_OF_WEEK = (
    "Lundi",
    "Mardi",
    "Mercredi",
    "Jeudi",
    "Vendredi",
    "Samedi",
    "Dimanche",
)

DayOfWeek = Literal[1, 2, 3, 4, 5, 6, 7]

# HH:MM or HH:MM:SS, as stored in a Postgres time column
HOUR_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


def day_label(day: int) -> str:
    return DAYS_OF_WEEK[day - 1]


def check_hour_order(start_hour: str, end_hour: str) -> None:
    if time.fromisoformat(start_hour) >= time.fromisoformat(end_hour):
        raise ValueError("start_hour must be before end_hour")


class ScheduleInsert(BaseModel):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    course_type_id: str
    day: DayOfWeek
    start_hour: str = Field(pattern=HOUR_PATTERN)
    end_hour: str = Field(pattern=HOUR_PATTERN)
    priority: Optional[int] = None

    @model_validator(mode="after")
    def require_start_before_end(self):
        check_hour_order(self.start_hour, self.end_hour)
        return self


class ScheduleUpdate(BaseModel):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    course_type_id: Optional[str] = None
    day: Optional[DayOfWeek] = None
    start_hour: Optional[str] = Field(default=None, pattern=HOUR_PATTERN)
    end_hour: Optional[str] = Field(default=None, pattern=HOUR_PATTERN)
    priority: Optional[int] = None

    @model_validator(mode="after")
    def require_start_before_end(self):
        # One-sided updates are checked against the stored row by the service
        if self.start_hour and self.end_hour:
            check_hour_order(self.start_hour, self.end_hour)
        return self


class Schedule(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime
    course_type_id: str
    day: DayOfWeek
    start_hour: str
    end_hour: str
    priority: int

    class Config:
        from_attributes = True


class CourseTypeSummary(BaseModel):
    id: str
    name: str
    color: Optional[str] = None
    text_color: Optional[str] = None
    priority: Optional[int] = None


class ScheduleWithCourseType(Schedule):
    """Schedule joined with its course type, read-only."""
    course_types: CourseTypeSummary


class DayInfo(BaseModel):
    value: DayOfWeek
    label: str
