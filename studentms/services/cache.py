"""
In-memory mirror of the store.

``DataStore`` holds the three collections as dicts keyed by their natural
key. Dicts keep insertion order, so "view all" listings come out in the
order rows were loaded or added. The store stays the source of truth: the
mutators here are only called after the matching store write succeeded.

Removal of a student or course also drops the dependent grades, applying
the same cascade policy the database enforces.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from studentms.core.cascade import COURSE, STUDENT, grade_matches
from studentms.schemas.course import Course
from studentms.schemas.grade import Grade
from studentms.schemas.student import Student

GradeKey = Tuple[str, str]


class DataStore:
    def __init__(self) -> None:
        self.students: Dict[str, Student] = {}
        self.courses: Dict[str, Course] = {}
        self.grades: Dict[GradeKey, Grade] = {}

    # ==========================
    # Loading
    # ==========================

    def clear(self) -> None:
        self.students.clear()
        self.courses.clear()
        self.grades.clear()

    def load(
        self,
        students: Iterable[Student],
        courses: Iterable[Course],
        grades: Iterable[Grade],
    ) -> None:
        """Replace the whole cache content (startup or full reload)."""
        self.clear()
        for s in students:
            self.students[s.roll_no] = s
        for c in courses:
            self.courses[c.code] = c
        for g in grades:
            self.grades[g.key] = g

    # ==========================
    # Lookups
    # ==========================

    def exists_student(self, roll_no: str) -> bool:
        return roll_no in self.students

    def exists_course(self, code: str) -> bool:
        return code in self.courses

    def already_enrolled(self, roll_no: str, code: str) -> bool:
        return (roll_no, code) in self.grades

    def get_student(self, roll_no: str) -> Optional[Student]:
        return self.students.get(roll_no)

    def get_course(self, code: str) -> Optional[Course]:
        return self.courses.get(code)

    def get_grade(self, roll_no: str, code: str) -> Optional[Grade]:
        return self.grades.get((roll_no, code))

    def grades_for_student(self, roll_no: str) -> Iterator[Grade]:
        return (g for g in self.grades.values() if g.roll_no == roll_no)

    def all_students(self) -> List[Student]:
        return list(self.students.values())

    def all_courses(self) -> List[Course]:
        return list(self.courses.values())

    def all_grades(self) -> List[Grade]:
        return list(self.grades.values())

    # ==========================
    # Inserts
    # ==========================

    def add_student(self, student: Student) -> bool:
        """Add if the roll number is unused. Returns True on success."""
        if student.roll_no in self.students:
            return False
        self.students[student.roll_no] = student
        return True

    def add_course(self, course: Course) -> bool:
        if course.code in self.courses:
            return False
        self.courses[course.code] = course
        return True

    def enroll(self, roll_no: str, code: str) -> bool:
        """Add a 0/0 grade row. Both parents must exist and the pair must be new."""
        if roll_no not in self.students or code not in self.courses:
            return False
        if (roll_no, code) in self.grades:
            return False
        self.grades[(roll_no, code)] = Grade(roll_no=roll_no, course_code=code)
        return True

    # ==========================
    # Updates
    # ==========================

    def apply_student_update(self, student: Student) -> bool:
        """Replace the cached student with the same roll number."""
        if student.roll_no not in self.students:
            return False
        self.students[student.roll_no] = student
        return True

    def apply_course_update(self, course: Course) -> bool:
        if course.code not in self.courses:
            return False
        self.courses[course.code] = course
        return True

    def enter_marks(self, roll_no: str, code: str, internal: float, final: float) -> bool:
        key = (roll_no, code)
        if key not in self.grades:
            return False
        self.grades[key] = self.grades[key].model_copy(
            update={"internal_mark": internal, "final_mark": final}
        )
        return True

    # ==========================
    # Removals (mirror the store cascades)
    # ==========================

    def _cascade(self, parent: str, key: str) -> int:
        doomed = [k for k, g in self.grades.items() if grade_matches(g, parent, key)]
        for k in doomed:
            del self.grades[k]
        return len(doomed)

    def remove_student(self, roll_no: str) -> bool:
        """Remove a student and every grade that references it."""
        removed = self.students.pop(roll_no, None) is not None
        self._cascade(STUDENT, roll_no)
        return removed

    def remove_course(self, code: str) -> bool:
        """Remove a course and every grade that references it."""
        removed = self.courses.pop(code, None) is not None
        self._cascade(COURSE, code)
        return removed

    def remove_enrollment(self, roll_no: str, code: str) -> bool:
        return self.grades.pop((roll_no, code), None) is not None

    def counts(self) -> Tuple[int, int, int]:
        return len(self.students), len(self.courses), len(self.grades)
