from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

from studentms.core.validation import (
    is_non_empty_short,
    is_valid_course_code,
    is_valid_name,
)


class CourseBase(BaseModel):
    code: str
    title: str
    description: Optional[str] = ""
    teacher: Optional[str] = ""


class CourseCreate(CourseBase):
    @field_validator("code", "title", "description", "teacher", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("code")
    @classmethod
    def check_code(cls, v: str) -> str:
        if not is_valid_course_code(v):
            raise ValueError("code must be 3 uppercase letters + 3 digits")
        return v

    @field_validator("title", "description")
    @classmethod
    def check_short_text(cls, v: str) -> str:
        if not is_non_empty_short(v):
            raise ValueError("value is required (max 60 chars)")
        return v

    @field_validator("teacher")
    @classmethod
    def check_teacher(cls, v: str) -> str:
        if not is_valid_name(v):
            raise ValueError("teacher must be 2-40 letters, spaces, hyphens or apostrophes")
        return v


class CourseUpdate(CourseCreate):
    pass


class Course(CourseBase):
    model_config = ConfigDict(from_attributes=True)
