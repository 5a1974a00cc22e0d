import logging
from dataclasses import dataclass
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple

from studentms.core.database import init_db
from studentms.core.exceptions import StoreBootstrapError
from studentms.models.course import Course as CourseRow
from studentms.models.grade import Grade as GradeRow
from studentms.models.student import Student as StudentRow
from studentms.schemas.course import Course
from studentms.schemas.grade import Grade
from studentms.schemas.student import Student
from studentms.seed import seed_data

logger = logging.getLogger(__name__)


@dataclass
class DbCounts:
    students: int = 0
    courses: int = 0
    enrolments: int = 0


def init_and_seed(engine: Engine, seed: bool = True) -> Session:
    """
    Open the store, create missing tables and seed sample rows on first run.
    Safe to call on every startup.

    Raises:
        StoreBootstrapError: if any step fails (the session is closed first)
    """
    db = init_db(engine)
    if seed:
        try:
            seed_data(db)
        except StoreBootstrapError:
            db.close()
            raise
    return db


def load_all(db: Session) -> Optional[Tuple[List[Student], List[Course], List[Grade]]]:
    """
    Read every row into plain records for the cache.
    Returns None if the store cannot be read.
    """
    try:
        students = [Student.model_validate(row) for row in db.query(StudentRow).all()]
        courses = [Course.model_validate(row) for row in db.query(CourseRow).all()]
        grades = [Grade.model_validate(row) for row in db.query(GradeRow).all()]
    except SQLAlchemyError as e:
        logger.error(f"❌ Could not load data: {e}")
        db.rollback()
        return None
    finally:
        db.expunge_all()

    logger.info(f"Loaded {len(students)} students, {len(courses)} courses, {len(grades)} grades")
    return students, courses, grades


def get_counts(db: Session) -> Optional[DbCounts]:
    """Live row counts straight from the store."""
    try:
        return DbCounts(
            students=db.query(func.count(StudentRow.roll_no)).scalar(),
            courses=db.query(func.count(CourseRow.code)).scalar(),
            enrolments=db.query(func.count(GradeRow.roll_no)).scalar(),
        )
    except SQLAlchemyError as e:
        logger.error(f"❌ Could not count rows: {e}")
        db.rollback()
        return None
