from pydantic import BaseModel
from typing import List, Optional


class ReportLine(BaseModel):
    course_code: str
    title: str
    internal_mark: float
    final_mark: float
    weighted: float
    passed: bool


class StudentReport(BaseModel):
    roll_no: str
    name: str
    lines: List[ReportLine] = []
    average: Optional[float] = None
    passed: int = 0

    @property
    def total(self) -> int:
        return len(self.lines)

    @property
    def has_courses(self) -> bool:
        return bool(self.lines)
