from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.modules.schedules.schemas import ScheduleInsert, ScheduleUpdate, ScheduleWithCourseType
from app.modules.schedules.service import ScheduleService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/admin/schedules", tags=["schedules"])


def get_schedule_service(supabase: Client = Depends(get_supabase)) -> ScheduleService:
    return ScheduleService(supabase)


@router.get("", response_model=List[ScheduleWithCourseType])
def list_schedules(
    day: Optional[int] = Query(default=None, ge=1, le=7),
    service: ScheduleService = Depends(get_schedule_service)
):
    """List schedules with their course type, ordered by day and start hour"""
    return service.list_schedules(day=day)


@router.post("", response_model=ScheduleWithCourseType, status_code=201)
def create_schedule(
    schedule_data: ScheduleInsert,
    service: ScheduleService = Depends(get_schedule_service)
):
    """Create a new schedule (409 if the course type does not exist)"""
    return service.create_schedule(schedule_data)


@router.get("/{schedule_id}", response_model=ScheduleWithCourseType)
def get_schedule(
    schedule_id: str,
    service: ScheduleService = Depends(get_schedule_service)
):
    return service.get_schedule(schedule_id)


@router.put("/{schedule_id}", response_model=ScheduleWithCourseType)
def update_schedule(
    schedule_id: str,
    schedule_data: ScheduleUpdate,
    service: ScheduleService = Depends(get_schedule_service)
):
    return service.update_schedule(schedule_id, schedule_data)


@router.delete("/{schedule_id}", status_code=204)
def delete_schedule(
    schedule_id: str,
    service: ScheduleService = Depends(get_schedule_service)
):
    service.delete_schedule(schedule_id)
    return None
