from sqlalchemy.orm import Session
from typing import List

from studentms.models.course import Course  # noqa: F401
from studentms.models.grade import Grade
from studentms.models.student import Student  # noqa: F401
from studentms.schemas.grade import MarksEntry
from studentms.services.store.base import store_operation


def _match(db: Session, roll_no: str, course_code: str):
    return db.query(Grade).filter(
        Grade.roll_no == roll_no,
        Grade.course_code == course_code
    )


def list_grades(db: Session) -> List[Grade]:
    """Get all grade rows"""
    return db.query(Grade).all()


@store_operation("enroll")
def enroll(db: Session, roll_no: str, course_code: str) -> bool:
    """Create the grade row for (student, course) with both marks at 0"""
    db.add(Grade(roll_no=roll_no, course_code=course_code, internal_mark=0.0, final_mark=0.0))
    db.commit()
    return True


@store_operation("enter marks")
def enter_marks(db: Session, roll_no: str, course_code: str, marks: MarksEntry) -> bool:
    """Set both marks of an existing enrollment"""
    changed = _match(db, roll_no, course_code).update(
        {
            Grade.internal_mark: marks.internal_mark,
            Grade.final_mark: marks.final_mark,
        },
        synchronize_session=False
    )
    db.commit()
    return changed > 0


@store_operation("delete enrollment")
def delete_enrollment(db: Session, roll_no: str, course_code: str) -> bool:
    """Delete one grade row"""
    deleted = _match(db, roll_no, course_code).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
