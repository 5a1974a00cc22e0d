from typing import Optional

from studentms.schemas.grade import is_pass
from studentms.schemas.report import ReportLine, StudentReport
from studentms.services.cache import DataStore


def build_student_report(cache: DataStore, roll_no: str) -> Optional[StudentReport]:
    """
    Per-student marks report, read from the cache only.

    Returns None when the student does not exist. A student without
    enrollments gets a report with no lines and no average. A grade whose
    course record is missing is shown under its raw course code.
    """
    student = cache.get_student(roll_no)
    if student is None:
        return None

    lines = []
    for g in cache.grades_for_student(roll_no):
        course = cache.get_course(g.course_code)
        lines.append(ReportLine(
            course_code=g.course_code,
            title=course.title if course is not None else g.course_code,
            internal_mark=g.internal_mark,
            final_mark=g.final_mark,
            weighted=g.weighted,
            passed=is_pass(g.weighted),
        ))

    average = sum(line.weighted for line in lines) / len(lines) if lines else None
    return StudentReport(
        roll_no=student.roll_no,
        name=student.name,
        lines=lines,
        average=average,
        passed=sum(1 for line in lines if line.passed),
    )
