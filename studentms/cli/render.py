"""
Text views for the console.

Pure formatting: every function takes the data to show and returns the lines
to print. Nothing here reads input or touches the store.
"""

from typing import Iterable, List, Optional

from studentms.schemas.course import Course
from studentms.schemas.grade import Grade
from studentms.schemas.report import StudentReport
from studentms.schemas.student import Student

WIDTH = 53
HEAVY = "=" * WIDTH
LIGHT = "-" * WIDTH


def _num(value: float) -> str:
    return f"{value:g}"


def _centered(text: str) -> str:
    return text.center(WIDTH).rstrip()


def welcome(project_name: str) -> List[str]:
    return [
        HEAVY,
        _centered("WELCOME"),
        HEAVY,
        _centered(project_name),
        HEAVY,
        "",
    ]


def main_menu(students: int, courses: int, enrolments: int) -> List[str]:
    return [
        HEAVY,
        _centered("MAIN MENU"),
        HEAVY,
        _centered(f"Students: {students:02d}   Courses: {courses:02d}   Enrolments: {enrolments:02d}"),
        LIGHT,
        "  [1]  Add student       [2]  View students",
        "  [3]  Add course        [4]  View courses",
        "  [5]  Enroll student    [6]  Enter marks",
        "  [7]  Student report    [13] View enrollments/grades",
        LIGHT,
        " EDIT:",
        "  [8]  Edit student      [9]  Edit course",
        LIGHT,
        " DELETE:",
        "  [10] Delete student    [11] Delete course",
        "  [12] Delete enrolment (student from course)",
        LIGHT,
        "  [0]  EXIT",
        HEAVY,
    ]


def students_table(students: Iterable[Student]) -> List[str]:
    rows = [f"{s.roll_no} - {s.name} - {s.address or ''} - {s.contact or ''}" for s in students]
    if not rows:
        return ["No students enrolled."]
    return [LIGHT, _centered("View Students"), LIGHT] + rows


def courses_table(courses: Iterable[Course]) -> List[str]:
    rows = [f"{c.code} - {c.title} - {c.teacher or ''}" for c in courses]
    return rows or ["No courses."]


def enrollments_table(grades: Iterable[Grade]) -> List[str]:
    rows = [
        f"{g.roll_no} -> {g.course_code}"
        f" | internal={_num(g.internal_mark)}"
        f" final={_num(g.final_mark)}"
        f" weighted={_num(g.weighted)}"
        for g in grades
    ]
    return rows or ["No enrollments."]


def student_report(report: Optional[StudentReport]) -> List[str]:
    if report is None:
        return ["Student not found."]

    lines = [f"Student: {report.name} ({report.roll_no})"]
    if not report.has_courses:
        lines.append("No courses enrolled.")
        return lines

    for line in report.lines:
        lines.append(
            f" - {line.title}"
            f" | internal={_num(line.internal_mark)}"
            f" final={_num(line.final_mark)}"
            f" grade={_num(line.weighted)}"
        )
    lines.append(
        f"Overall average: {_num(report.average)}"
        f" | Courses: {report.total}"
        f" | Passed: {report.passed}/{report.total}"
    )
    return lines
