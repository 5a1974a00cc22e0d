import logging
from sqlalchemy.orm import Session
from typing import List, Optional

from studentms.core.cascade import STUDENT, cascade_column
from studentms.models.course import Course  # noqa: F401
from studentms.models.grade import Grade
from studentms.models.student import Student
from studentms.schemas.student import StudentCreate, StudentUpdate
from studentms.services.store.base import store_operation

logger = logging.getLogger(__name__)


def get_student(db: Session, roll_no: str) -> Optional[Student]:
    """Get one student by roll number"""
    return db.query(Student).filter(Student.roll_no == roll_no).first()


def list_students(db: Session) -> List[Student]:
    """Get all students"""
    return db.query(Student).all()


@store_operation("add student")
def add_student(db: Session, student: StudentCreate) -> bool:
    """Insert a new student row"""
    db.add(Student(
        roll_no=student.roll_no,
        name=student.name,
        address=student.address,
        contact=student.contact
    ))
    db.commit()
    return True


@store_operation("update student")
def update_student(db: Session, student: StudentUpdate) -> bool:
    """Overwrite every field of an existing student"""
    changed = db.query(Student).filter(Student.roll_no == student.roll_no).update(
        {
            Student.name: student.name,
            Student.address: student.address,
            Student.contact: student.contact,
        },
        synchronize_session=False
    )
    db.commit()
    return changed > 0


@store_operation("delete student")
def delete_student(db: Session, roll_no: str) -> bool:
    """Delete a student; the database cascades to its grades"""
    column = getattr(Grade, cascade_column(STUDENT))
    dependents = db.query(Grade).filter(column == roll_no).count()
    deleted = db.query(Student).filter(Student.roll_no == roll_no).delete(
        synchronize_session=False
    )
    db.commit()
    if deleted:
        logger.info(f"Deleted student {roll_no} (cascade removed {dependents} grade rows)")
    return deleted > 0
