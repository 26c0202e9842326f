from datetime import datetime, timezone
from supabase import Client
from postgrest.exceptions import APIError
from app.database.errors import http_error_from_api_error
from app.database.types import COURSE_TYPES_TABLE
from app.modules.course_types.schemas import CourseType, CourseTypeInsert, CourseTypeUpdate
from typing import List
from fastapi import HTTPException


class CourseTypeService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_course_types(self) -> List[CourseType]:
        """List course types in display order"""
        try:
            result = self.supabase.table(COURSE_TYPES_TABLE)\
                .select("*")\
                .order("display_order")\
                .execute()

            rows = [CourseType(**row) for row in result.data or []]
            return sorted(rows, key=lambda c: (c.display_order, c.name.lower()))
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting course type")

    def get_course_type(self, course_type_id: str) -> CourseType:
        """Get course type by ID"""
        try:
            result = self.supabase.table(COURSE_TYPES_TABLE)\
                .select("*")\
                .eq("id", course_type_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Course type not found")

            return CourseType(**result.data[0])
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting course type")

    def create_course_type(self, course_type_data: CourseTypeInsert) -> CourseType:
        """Create a new course type; omitted server fields get their defaults"""
        try:
            payload = course_type_data.model_dump(mode="json", exclude_none=True)
            result = self.supabase.table(COURSE_TYPES_TABLE).insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create course type")

            return CourseType(**result.data[0])
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting course type")

    def update_course_type(self, course_type_id: str, course_type_data: CourseTypeUpdate) -> CourseType:
        """Update course type"""
        try:
            update_data = course_type_data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
            update_data.pop("id", None)

            if not update_data:
                # No changes, return existing
                return self.get_course_type(course_type_id)

            update_data.setdefault("updated_at", datetime.now(timezone.utc).isoformat())

            result = self.supabase.table(COURSE_TYPES_TABLE)\
                .update(update_data)\
                .eq("id", course_type_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Course type not found")

            return CourseType(**result.data[0])
        except APIError as e:
            raise http_error_from_api_error(e, "Conflicting course type")

    def delete_course_type(self, course_type_id: str) -> None:
        """Delete course type; refused while schedules still reference it"""
        try:
            result = self.supabase.table(COURSE_TYPES_TABLE)\
                .delete()\
                .eq("id", course_type_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Course type not found")
        except APIError as e:
            raise http_error_from_api_error(e, "Course type is still used by schedules")
