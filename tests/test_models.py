"""Tests for the record schemas and the grading policy."""

import pytest
from pydantic import ValidationError

from studentms.core.cascade import COURSE, STUDENT, cascade_column, grade_matches
from studentms.schemas.course import CourseCreate
from studentms.schemas.grade import Grade, MarksEntry, PASS_THRESHOLD, is_pass, weighted_score
from studentms.schemas.student import Student, StudentCreate

from conftest import VALID_PHONE


class TestWeightedScore:
    def test_thirty_seventy_split(self):
        assert weighted_score(80, 90) == pytest.approx(87.0)
        assert weighted_score(60, 80) == pytest.approx(74.0)

    def test_grade_computes_on_read(self):
        g = Grade(roll_no="S001", course_code="MTH101", internal_mark=80, final_mark=90)
        assert g.weighted == pytest.approx(0.3 * 80 + 0.7 * 90)
        g2 = g.model_copy(update={"final_mark": 0})
        assert g2.weighted == pytest.approx(24.0)

    def test_new_enrollment_defaults_to_zero(self):
        g = Grade(roll_no="S001", course_code="MTH101")
        assert (g.internal_mark, g.final_mark, g.weighted) == (0.0, 0.0, 0.0)

    def test_pass_threshold_is_inclusive(self):
        assert PASS_THRESHOLD == 50.0
        assert is_pass(50.0)
        assert not is_pass(49.99)
        assert is_pass(weighted_score(50, 50))


class TestMarksEntry:
    def test_accepts_range(self):
        m = MarksEntry(internal_mark=0, final_mark=100)
        assert m.internal_mark == 0 and m.final_mark == 100

    @pytest.mark.parametrize("internal, final", [(-1, 50), (50, 100.5)])
    def test_rejects_out_of_range(self, internal, final):
        with pytest.raises(ValidationError):
            MarksEntry(internal_mark=internal, final_mark=final)


class TestStudentSchemas:
    def test_create_strips_and_validates(self):
        s = StudentCreate(roll_no=" S010 ", name="Sam", address="1 Rd", contact=VALID_PHONE)
        assert s.roll_no == "S010"

    @pytest.mark.parametrize("field, value", [
        ("roll_no", "S1"),
        ("name", "S4m"),
        ("address", ""),
        ("contact", "021-111"),
    ])
    def test_create_rejects_invalid_field(self, field, value):
        data = dict(roll_no="S010", name="Sam", address="1 Rd", contact=VALID_PHONE)
        data[field] = value
        with pytest.raises(ValidationError):
            StudentCreate(**data)

    def test_read_schema_accepts_stored_values(self):
        # seed rows predate the phone rule
        s = Student(roll_no="S001", name="Ava", address="12 Oak St", contact="021-111")
        assert s.contact == "021-111"


class TestCourseSchemas:
    def test_create(self):
        c = CourseCreate(code="ABC123", title="Title", description="Desc", teacher="Teacher")
        assert c.code == "ABC123"

    def test_lowercase_code_rejected(self):
        with pytest.raises(ValidationError):
            CourseCreate(code="abc123", title="Title", description="Desc", teacher="Teacher")


class TestCascadePolicy:
    def test_columns(self):
        assert cascade_column(STUDENT) == "roll_no"
        assert cascade_column(COURSE) == "course_code"

    def test_unknown_parent(self):
        with pytest.raises(ValueError):
            cascade_column("teacher")

    def test_grade_matches(self):
        g = Grade(roll_no="S001", course_code="MTH101")
        assert grade_matches(g, STUDENT, "S001")
        assert grade_matches(g, COURSE, "MTH101")
        assert not grade_matches(g, STUDENT, "S002")
        assert not grade_matches(g, COURSE, "S001")
