from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

from studentms.core.validation import (
    is_non_empty_short,
    is_valid_name,
    is_valid_phone,
    is_valid_roll,
)


class StudentBase(BaseModel):
    roll_no: str
    name: str
    address: Optional[str] = ""
    contact: Optional[str] = ""


class StudentCreate(StudentBase):
    """Student typed in at the console; every field is checked."""

    @field_validator("roll_no", "name", "address", "contact", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("roll_no")
    @classmethod
    def check_roll(cls, v: str) -> str:
        if not is_valid_roll(v):
            raise ValueError("roll_no must be S followed by 3-6 digits")
        return v

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not is_valid_name(v):
            raise ValueError("name must be 2-40 letters, spaces, hyphens or apostrophes")
        return v

    @field_validator("address")
    @classmethod
    def check_address(cls, v: str) -> str:
        if not is_non_empty_short(v):
            raise ValueError("address is required (max 60 chars)")
        return v

    @field_validator("contact")
    @classmethod
    def check_contact(cls, v: str) -> str:
        if not is_valid_phone(v):
            raise ValueError("contact must be a valid NZ phone number")
        return v


class StudentUpdate(StudentCreate):
    pass


class Student(StudentBase):
    model_config = ConfigDict(from_attributes=True)
