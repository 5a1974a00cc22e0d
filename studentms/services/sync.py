"""
Keeps the store and the in-memory cache in step.

Every mutating action follows the same order:

1. check preconditions against the cache (no store round trip);
2. write to the store;
3. only if the store write succeeded, apply the same change to the cache.

A failed store write leaves the cache untouched, so the cache never shows
state the store does not have. Deleting a student or course lets the
database cascade to the grades; the cache applies the same cascade itself.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from sqlalchemy.orm import Session
from typing import Optional, Tuple

from studentms.core.validation import is_valid_mark
from studentms.schemas.course import Course, CourseCreate, CourseUpdate
from studentms.schemas.grade import MarksEntry
from studentms.schemas.report import StudentReport
from studentms.schemas.student import Student, StudentCreate, StudentUpdate
from studentms.services import report
from studentms.services.cache import DataStore
from studentms.services.store import course as course_store
from studentms.services.store import grade as grade_store
from studentms.services.store import loader
from studentms.services.store import student as student_store

logger = logging.getLogger(__name__)


class SyncStatus(str, Enum):
    OK = "ok"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    STUDENT_NOT_FOUND = "student_not_found"
    COURSE_NOT_FOUND = "course_not_found"
    ALREADY_ENROLLED = "already_enrolled"
    NOT_ENROLLED = "not_enrolled"
    INVALID_MARKS = "invalid_marks"
    STORE_FAILED = "store_failed"


@dataclass(frozen=True)
class SyncResult:
    status: SyncStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status is SyncStatus.OK


def _ok(message: str) -> SyncResult:
    return SyncResult(SyncStatus.OK, message)


def _fail(status: SyncStatus, message: str) -> SyncResult:
    if status is SyncStatus.STORE_FAILED:
        logger.warning(message)
    return SyncResult(status, message)


class RecordService:
    """
    Use cases over one store session and one cache.

    Both handles are passed in; nothing here is global, so tests can pair a
    throwaway database with a fresh cache.
    """

    def __init__(self, db: Session, cache: DataStore):
        self.db = db
        self.cache = cache

    # ==========================
    # Startup
    # ==========================

    def reload(self) -> bool:
        """Rebuild the cache from the store. The cache is left as is on failure."""
        data = loader.load_all(self.db)
        if data is None:
            return False
        self.cache.load(*data)
        return True

    def counts(self) -> Tuple[int, int, int]:
        return self.cache.counts()

    # ==========================
    # Students
    # ==========================

    def add_student(self, student: StudentCreate) -> SyncResult:
        if self.cache.exists_student(student.roll_no):
            return _fail(SyncStatus.DUPLICATE, "That roll is already used.")
        if not student_store.add_student(self.db, student):
            return _fail(SyncStatus.STORE_FAILED, "Could not add student (duplicate or DB error).")
        self.cache.add_student(Student.model_validate(student.model_dump()))
        return _ok("Student added (saved to DB).")

    def update_student(self, student: StudentUpdate) -> SyncResult:
        if not self.cache.exists_student(student.roll_no):
            return _fail(SyncStatus.NOT_FOUND, "Student not found.")
        if not student_store.update_student(self.db, student):
            return _fail(SyncStatus.STORE_FAILED, "Update failed (DB error or not found).")
        self.cache.apply_student_update(Student.model_validate(student.model_dump()))
        return _ok("Student updated (saved to DB).")

    def delete_student(self, roll_no: str) -> SyncResult:
        if not self.cache.exists_student(roll_no):
            return _fail(SyncStatus.NOT_FOUND, "Student not found.")
        if not student_store.delete_student(self.db, roll_no):
            return _fail(SyncStatus.STORE_FAILED, "Delete failed (DB error or not found).")
        self.cache.remove_student(roll_no)
        return _ok("Student deleted (DB + local grades removed).")

    # ==========================
    # Courses
    # ==========================

    def add_course(self, course: CourseCreate) -> SyncResult:
        if self.cache.exists_course(course.code):
            return _fail(SyncStatus.DUPLICATE, "Course code already exists.")
        if not course_store.add_course(self.db, course):
            return _fail(SyncStatus.STORE_FAILED, "Could not add course (duplicate or DB error).")
        self.cache.add_course(Course.model_validate(course.model_dump()))
        return _ok("Course added (saved to DB).")

    def update_course(self, course: CourseUpdate) -> SyncResult:
        if not self.cache.exists_course(course.code):
            return _fail(SyncStatus.NOT_FOUND, "Course not found.")
        if not course_store.update_course(self.db, course):
            return _fail(SyncStatus.STORE_FAILED, "Update failed (DB error or not found).")
        self.cache.apply_course_update(Course.model_validate(course.model_dump()))
        return _ok("Course updated (saved to DB).")

    def delete_course(self, code: str) -> SyncResult:
        if not self.cache.exists_course(code):
            return _fail(SyncStatus.NOT_FOUND, "Course not found.")
        if not course_store.delete_course(self.db, code):
            return _fail(SyncStatus.STORE_FAILED, "Delete failed (DB error or not found).")
        self.cache.remove_course(code)
        return _ok("Course deleted (DB + local grades removed).")

    # ==========================
    # Enrollments and marks
    # ==========================

    def enroll(self, roll_no: str, code: str) -> SyncResult:
        if not self.cache.exists_student(roll_no):
            return _fail(SyncStatus.STUDENT_NOT_FOUND, "Student does not exist.")
        if not self.cache.exists_course(code):
            return _fail(SyncStatus.COURSE_NOT_FOUND, "Course does not exist.")
        if self.cache.already_enrolled(roll_no, code):
            return _fail(SyncStatus.ALREADY_ENROLLED, "Already enrolled.")
        if not grade_store.enroll(self.db, roll_no, code):
            return _fail(SyncStatus.STORE_FAILED, "Failed to enroll.")
        self.cache.enroll(roll_no, code)
        return _ok("Enrollment success (saved to DB).")

    def enter_marks(self, roll_no: str, code: str, internal: float, final: float) -> SyncResult:
        if not (is_valid_mark(internal) and is_valid_mark(final)):
            return _fail(SyncStatus.INVALID_MARKS, "Marks must be between 0 and 100.")
        if not self.cache.already_enrolled(roll_no, code):
            return _fail(SyncStatus.NOT_ENROLLED, "Not enrolled in that course.")
        marks = MarksEntry(internal_mark=internal, final_mark=final)
        if not grade_store.enter_marks(self.db, roll_no, code, marks):
            return _fail(SyncStatus.STORE_FAILED, "Failed to save marks.")
        self.cache.enter_marks(roll_no, code, marks.internal_mark, marks.final_mark)
        return _ok("Marks saved (persisted to DB).")

    def delete_enrollment(self, roll_no: str, code: str) -> SyncResult:
        if not self.cache.already_enrolled(roll_no, code):
            return _fail(SyncStatus.NOT_ENROLLED, "Not enrolled in that course.")
        if not grade_store.delete_enrollment(self.db, roll_no, code):
            return _fail(SyncStatus.STORE_FAILED, "Delete failed (DB error or not found).")
        self.cache.remove_enrollment(roll_no, code)
        return _ok("Enrollment deleted (DB).")

    # ==========================
    # Reads (cache only)
    # ==========================

    def student_report(self, roll_no: str) -> Optional[StudentReport]:
        return report.build_student_report(self.cache, roll_no)
