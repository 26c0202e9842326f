from datetime import datetime, timezone
from supabase import Client
from postgrest.exceptions import APIError
from app.database.errors import http_error_from_api_error
from app.database.types import SCHEDULES_TABLE
from app.modules.schedules.schemas import (
    ScheduleInsert, ScheduleUpdate, ScheduleWithCourseType, DAYS_OF_WEEK, check_hour_order
)
from typing import Dict, List, Optional
from fastapi import HTTPException

# Schedule row with its course type embedded through schedules_course_type_id_fkey
SCHEDULE_WITH_COURSE_TYPE = "*, course_types(*)"


def sort_schedules(schedules: List[ScheduleWithCourseType]) -> List[ScheduleWithCourseType]:
    return sorted(schedules, key=lambda s: (s.day, s.start_hour, s.priority))


def group_by_day(schedules: List[ScheduleWithCourseType]) -> Dict[int, List[ScheduleWithCourseType]]:
    """Weekly view: every day 1..7 present, each day ordered by start hour then priority."""
    week: Dict[int, List[ScheduleWithCourseType]] = {day: [] for day in range(1, len(DAYS_OF_WEEK) + 1)}
    for schedule in sort_schedules(schedules):
        week[schedule.day].append(schedule)
    return week


class ScheduleService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_schedules(self, day: Optional[int] = None) -> List[ScheduleWithCourseType]:
        """List schedules with their course type, optionally for one day"""
        try:
            query = self.supabase.table(SCHEDULES_TABLE).select(SCHEDULE_WITH_COURSE_TYPE)
            if day is not None:
                query = query.eq("day", day)

            result = query.order("day").execute()

            return sort_schedules([ScheduleWithCourseType(**row) for row in result.data or []])
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting schedule")

    def get_week(self) -> Dict[int, List[ScheduleWithCourseType]]:
        return group_by_day(self.list_schedules())

    def get_schedule(self, schedule_id: str) -> ScheduleWithCourseType:
        """Get schedule by ID"""
        try:
            result = self.supabase.table(SCHEDULES_TABLE)\
                .select(SCHEDULE_WITH_COURSE_TYPE)\
                .eq("id", schedule_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Schedule not found")

            return ScheduleWithCourseType(**result.data[0])
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting schedule")

    def create_schedule(self, schedule_data: ScheduleInsert) -> ScheduleWithCourseType:
        """Create a new schedule; the course type must exist"""
        try:
            payload = schedule_data.model_dump(mode="json", exclude_none=True)
            result = self.supabase.table(SCHEDULES_TABLE).insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create schedule")
        except APIError as e:
            raise http_error_from_api_error(e, "Course type not found")

        return self.get_schedule(result.data[0]["id"])

    def update_schedule(self, schedule_id: str, schedule_data: ScheduleUpdate) -> ScheduleWithCourseType:
        """Update schedule; fields not sent keep their stored value"""
        update_data = schedule_data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        update_data.pop("id", None)

        if not update_data:
            return self.get_schedule(schedule_id)

        if "start_hour" in update_data or "end_hour" in update_data:
            existing = self.get_schedule(schedule_id)
            try:
                check_hour_order(
                    update_data.get("start_hour", existing.start_hour),
                    update_data.get("end_hour", existing.end_hour),
                )
            except ValueError as e:
                raise HTTPException(status_code=422, detail=str(e))

        update_data.setdefault("updated_at", datetime.now(timezone.utc).isoformat())

        try:
            result = self.supabase.table(SCHEDULES_TABLE)\
                .update(update_data)\
                .eq("id", schedule_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Schedule not found")
        except APIError as e:
            raise http_error_from_api_error(e, "Course type not found")

        return self.get_schedule(schedule_id)

    def delete_schedule(self, schedule_id: str) -> None:
        """Delete schedule"""
        try:
            result = self.supabase.table(SCHEDULES_TABLE)\
                .delete()\
                .eq("id", schedule_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Schedule not found")
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting schedule")
