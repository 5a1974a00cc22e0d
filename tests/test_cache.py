"""Tests for the in-memory cache."""

import pytest

from studentms.schemas.course import Course
from studentms.schemas.grade import Grade
from studentms.schemas.student import Student
from studentms.services.cache import DataStore


@pytest.fixture
def cache():
    c = DataStore()
    c.load(
        [Student(roll_no="S001", name="Ava"), Student(roll_no="S002", name="Leo")],
        [Course(code="MTH101", title="Maths"), Course(code="SCI101", title="Science")],
        [
            Grade(roll_no="S001", course_code="MTH101", internal_mark=75, final_mark=88),
            Grade(roll_no="S001", course_code="SCI101"),
            Grade(roll_no="S002", course_code="MTH101"),
        ],
    )
    return c


def test_load_replaces_content(cache):
    cache.load([Student(roll_no="S009", name="Zed")], [], [])
    assert cache.counts() == (1, 0, 0)


def test_lookups(cache):
    assert cache.exists_student("S001")
    assert not cache.exists_student("S003")
    assert cache.exists_course("SCI101")
    assert cache.already_enrolled("S002", "MTH101")
    assert not cache.already_enrolled("S002", "SCI101")


def test_add_rejects_duplicates(cache):
    assert not cache.add_student(Student(roll_no="S001", name="Other"))
    assert cache.get_student("S001").name == "Ava"
    assert cache.add_student(Student(roll_no="S003", name="Mia"))
    assert not cache.add_course(Course(code="MTH101", title="Again"))


def test_insertion_order_kept_across_updates(cache):
    cache.add_student(Student(roll_no="S000", name="First"))
    cache.apply_student_update(Student(roll_no="S001", name="Ava Updated"))
    assert [s.roll_no for s in cache.all_students()] == ["S001", "S002", "S000"]
    assert cache.get_student("S001").name == "Ava Updated"


def test_updates_require_existing(cache):
    assert not cache.apply_student_update(Student(roll_no="S404", name="Ghost"))
    assert not cache.apply_course_update(Course(code="XYZ999", title="Ghost"))
    assert cache.counts() == (2, 2, 3)


def test_enroll(cache):
    assert cache.enroll("S002", "SCI101")
    assert cache.get_grade("S002", "SCI101").weighted == 0.0
    assert not cache.enroll("S002", "SCI101")
    assert not cache.enroll("S404", "SCI101")
    assert not cache.enroll("S001", "XYZ999")


def test_enter_marks(cache):
    assert cache.enter_marks("S002", "MTH101", 60, 80)
    g = cache.get_grade("S002", "MTH101")
    assert (g.internal_mark, g.final_mark) == (60, 80)
    assert g.weighted == pytest.approx(74.0)
    assert not cache.enter_marks("S002", "SCI101", 60, 80)


def test_remove_student_cascades(cache):
    assert cache.remove_student("S001")
    assert not any(g.roll_no == "S001" for g in cache.all_grades())
    assert cache.counts() == (1, 2, 1)


def test_remove_course_cascades(cache):
    assert cache.remove_course("MTH101")
    assert [g.key for g in cache.all_grades()] == [("S001", "SCI101")]


def test_remove_missing(cache):
    assert not cache.remove_student("S404")
    assert not cache.remove_course("XYZ999")
    assert not cache.remove_enrollment("S002", "SCI101")
    assert cache.counts() == (2, 2, 3)


def test_grades_for_student(cache):
    assert [g.course_code for g in cache.grades_for_student("S001")] == ["MTH101", "SCI101"]
