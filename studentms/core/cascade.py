"""
Cascade policy for grade rows.

A grade depends on exactly one student and one course. When either parent
is deleted, every grade whose foreign key column holds the parent's key goes
with it. The store declares this as ON DELETE CASCADE on the grades table
(see ``studentms.models.grade``); the cache has no constraints and applies
the same rule by hand through ``grade_matches``. Both sides read the
mapping below, so they cannot disagree about which column links a parent.
"""

from typing import Any, Dict

STUDENT = "student"
COURSE = "course"

# parent kind -> (grade column holding the key, "table.column" it references)
GRADE_PARENTS: Dict[str, tuple] = {
    STUDENT: ("roll_no", "students.roll_no"),
    COURSE: ("course_code", "courses.code"),
}

ON_DELETE = "CASCADE"


def cascade_column(parent: str) -> str:
    """Name of the grade column that references ``parent``."""
    try:
        return GRADE_PARENTS[parent][0]
    except KeyError:
        raise ValueError(f"Unknown parent kind: {parent!r}") from None


def referenced_column(parent: str) -> str:
    return GRADE_PARENTS[parent][1]


def grade_matches(grade: Any, parent: str, key: str) -> bool:
    """True if deleting the ``parent`` identified by ``key`` removes ``grade``."""
    return getattr(grade, cascade_column(parent)) == key
