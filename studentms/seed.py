import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studentms.core.exceptions import StoreBootstrapError
from studentms.models.course import Course
from studentms.models.grade import Grade
from studentms.models.student import Student

logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    ("S001", "Ava", "12 Oak St", "021-111"),
    ("S002", "Leo", "34 Pine Ave", "021-222"),
    ("S003", "Mia", "56 Willow Rd", "021-333"),
]

SEED_COURSES = [
    ("MTH101", "Maths", "Numbers and algebra", "Mr. King"),
    ("SCI101", "Science", "Intro science", "Ms. Ray"),
    ("ENG101", "English", "Reading & writing", "Mrs. Lee"),
]

SEED_GRADES = [
    ("S001", "MTH101", 75, 88),
    ("S001", "SCI101", 62, 70),
    ("S002", "ENG101", 80, 92),
    ("S003", "MTH101", 55, 60),
]


def store_is_empty(db: Session) -> bool:
    return not any(
        db.query(model).first() is not None
        for model in (Student, Course, Grade)
    )


def seed_data(db: Session) -> bool:
    """
    Seed the sample rows on first run.

    Does nothing when any of the three tables already holds a row.
    Returns True if rows were inserted.

    Raises:
        StoreBootstrapError: if the inserts fail
    """
    try:
        # 1. Check if data already exists to avoid duplication
        if not store_is_empty(db):
            logger.info("Database already contains data. Skipping seed.")
            return False

        logger.info("Seeding data...")

        # 2. Parents first, grades reference them
        db.add_all(
            Student(roll_no=r, name=n, address=a, contact=c)
            for r, n, a, c in SEED_STUDENTS
        )
        db.add_all(
            Course(code=code, title=t, description=d, teacher=teacher)
            for code, t, d, teacher in SEED_COURSES
        )
        db.flush()
        db.add_all(
            Grade(roll_no=r, course_code=code, internal_mark=i, final_mark=f)
            for r, code, i, f in SEED_GRADES
        )

        # 3. Commit
        db.commit()
        logger.info("✅ Data seeded successfully!")
        return True

    except SQLAlchemyError as e:
        logger.error(f"❌ Error seeding data: {e}")
        db.rollback()  # Rollback if error occurs
        raise StoreBootstrapError(f"Cannot seed database: {e}", stage="init") from e
    finally:
        db.expunge_all()
