import logging
from sqlalchemy.orm import Session
from typing import List, Optional

from studentms.core.cascade import COURSE, cascade_column
from studentms.models.course import Course
from studentms.models.grade import Grade
from studentms.models.student import Student  # noqa: F401
from studentms.schemas.course import CourseCreate, CourseUpdate
from studentms.services.store.base import store_operation

logger = logging.getLogger(__name__)


def get_course(db: Session, code: str) -> Optional[Course]:
    """Get one course by code"""
    return db.query(Course).filter(Course.code == code).first()


def list_courses(db: Session) -> List[Course]:
    """Get all courses"""
    return db.query(Course).all()


@store_operation("add course")
def add_course(db: Session, course: CourseCreate) -> bool:
    """Insert a new course row"""
    db.add(Course(
        code=course.code,
        title=course.title,
        description=course.description,
        teacher=course.teacher
    ))
    db.commit()
    return True


@store_operation("update course")
def update_course(db: Session, course: CourseUpdate) -> bool:
    """Overwrite every field of an existing course"""
    changed = db.query(Course).filter(Course.code == course.code).update(
        {
            Course.title: course.title,
            Course.description: course.description,
            Course.teacher: course.teacher,
        },
        synchronize_session=False
    )
    db.commit()
    return changed > 0


@store_operation("delete course")
def delete_course(db: Session, code: str) -> bool:
    """Delete a course; the database cascades to its grades"""
    column = getattr(Grade, cascade_column(COURSE))
    dependents = db.query(Grade).filter(column == code).count()
    deleted = db.query(Course).filter(Course.code == code).delete(
        synchronize_session=False
    )
    db.commit()
    if deleted:
        logger.info(f"Deleted course {code} (cascade removed {dependents} grade rows)")
    return deleted > 0
