from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.course_types.schemas import CourseType, CourseTypeInsert, CourseTypeUpdate
from app.modules.course_types.service import CourseTypeService
from supabase import Client
from typing import List

router = APIRouter(prefix="/admin/course-types", tags=["course-types"])


def get_course_type_service(supabase: Client = Depends(get_supabase)) -> CourseTypeService:
    return CourseTypeService(supabase)


@router.get("", response_model=List[CourseType])
def list_course_types(service: CourseTypeService = Depends(get_course_type_service)):
    """List course types in display order"""
    return service.list_course_types()


@router.post("", response_model=CourseType, status_code=201)
def create_course_type(
    course_type_data: CourseTypeInsert,
    service: CourseTypeService = Depends(get_course_type_service)
):
    """Create a new course type"""
    return service.create_course_type(course_type_data)


@router.get("/{course_type_id}", response_model=CourseType)
def get_course_type(
    course_type_id: str,
    service: CourseTypeService = Depends(get_course_type_service)
):
    return service.get_course_type(course_type_id)


@router.put("/{course_type_id}", response_model=CourseType)
def update_course_type(
    course_type_id: str,
    course_type_data: CourseTypeUpdate,
    service: CourseTypeService = Depends(get_course_type_service)
):
    return service.update_course_type(course_type_id, course_type_data)


@router.delete("/{course_type_id}", status_code=204)
def delete_course_type(
    course_type_id: str,
    service: CourseTypeService = Depends(get_course_type_service)
):
    """Delete course type (409 while schedules reference it)"""
    service.delete_course_type(course_type_id)
    return None
