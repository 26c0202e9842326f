from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CourseTypeInsert(BaseModel):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    name: str = Field(min_length=1)
    display_order: Optional[int] = None


class CourseTypeUpdate(BaseModel):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    name: Optional[str] = Field(default=None, min_length=1)
    display_order: Optional[int] = None


class CourseType(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime
    name: str
    display_order: int

    class Config:
        from_attributes = True
