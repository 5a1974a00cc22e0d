"""End-to-end tests of the console menu over a scripted prompter."""

import pytest

from studentms.cli.menu import Menu
from studentms.services.store.loader import get_counts

from conftest import VALID_PHONE

ADD_SAM = ["1", "S010", "Sam", "1 Rd", VALID_PHONE]
ADD_ABC = ["3", "ABC123", "Title", "Desc", "Teacher"]


def run_menu(service, scripted, *lines):
    p = scripted(*lines)
    Menu(service, p).run()
    return p.stdout.getvalue()


def store_counts(service):
    c = get_counts(service.db)
    return c.students, c.courses, c.enrolments


def test_full_session(service, scripted):
    out = run_menu(
        service, scripted,
        *ADD_SAM,
        *ADD_ABC,
        "5", "S010", "ABC123",
        "6", "S010", "ABC123", "60", "80",
        "7", "S010",
        "0",
    )
    assert "Student added (saved to DB)." in out
    assert "Course added (saved to DB)." in out
    assert "Enrollment success (saved to DB)." in out
    assert "Marks saved (persisted to DB)." in out
    assert " - Title | internal=60 final=80 grade=74" in out
    assert "Overall average: 74 | Courses: 1 | Passed: 1/1" in out
    assert store_counts(service) == (1, 1, 1)


def test_delete_student_with_confirmation(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "10", "S001", "y", "7", "S001", "13", "0")
    assert "Student deleted (DB + local grades removed)." in out
    assert "Student not found." in out
    assert "S001 ->" not in out
    assert store_counts(seeded_service) == (2, 3, 2)


def test_declined_delete_changes_nothing(seeded_service, scripted):
    run_menu(seeded_service, scripted, "11", "MTH101", "n", "0")
    assert store_counts(seeded_service) == (3, 3, 4)
    assert seeded_service.counts() == (3, 3, 4)


@pytest.mark.parametrize("back_at", range(len(ADD_SAM) - 1))
def test_back_at_any_field_writes_nothing(service, scripted, back_at):
    answers = ADD_SAM[:back_at + 1] + ["0"]
    out = run_menu(service, scripted, *answers, "0")
    assert "Student added" not in out
    assert store_counts(service) == (0, 0, 0)
    assert service.counts() == (0, 0, 0)


def test_back_during_marks_keeps_old_marks(seeded_service, scripted):
    before = seeded_service.cache.get_grade("S001", "MTH101")
    run_menu(seeded_service, scripted, "6", "S001", "MTH101", "55", "b", "0")
    assert seeded_service.cache.get_grade("S001", "MTH101") == before


def test_exit_from_a_prompt_ends_session(service, scripted):
    out = run_menu(service, scripted, "1", "S010", "x", "1", "S011", "Never", "1 Rd", VALID_PHONE)
    assert service.counts() == (0, 0, 0)
    assert out.count("MAIN MENU") == 1


def test_end_of_input_ends_session(service, scripted):
    out = run_menu(service, scripted, "1", "S010")
    assert out.count("MAIN MENU") == 1
    assert service.counts() == (0, 0, 0)


def test_unknown_and_non_numeric_choices(service, scripted):
    out = run_menu(service, scripted, "42", "hello", "0")
    assert "Unknown option." in out
    assert out.count("MAIN MENU") == 3


def test_duplicate_roll_is_caught_before_more_questions(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "1", "S001", "0")
    assert "That roll is already used." in out
    assert "Name (0=Back, x=Exit): " not in out


def test_enroll_twice(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "5", "S002", "MTH101", "5", "S002", "MTH101", "0")
    assert "Enrollment success (saved to DB)." in out
    assert "Already enrolled." in out
    assert store_counts(seeded_service) == (3, 3, 5)


def test_marks_need_enrollment(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "6", "S002", "MTH101", "0")
    assert "Not enrolled in that course." in out
    assert "Internal mark" not in out


def test_edit_keeps_values_on_enter(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "8", "S001", "Ava Stone", "", "", "0")
    assert "Student updated (saved to DB)." in out
    ava = seeded_service.cache.get_student("S001")
    assert ava.name == "Ava Stone"
    # contact predates the phone rule and is kept as stored
    assert ava.contact == "021-111"


def test_edit_course(seeded_service, scripted):
    run_menu(seeded_service, scripted, "9", "SCI101", "Physics", "", "", "0")
    assert seeded_service.cache.get_course("SCI101").title == "Physics"
    assert seeded_service.cache.get_course("SCI101").teacher == "Ms. Ray"


def test_delete_enrollment(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "12", "S001", "SCI101", "y", "0")
    assert "Enrollment deleted (DB)." in out
    assert store_counts(seeded_service) == (3, 3, 3)


def test_views(seeded_service, scripted):
    out = run_menu(seeded_service, scripted, "2", "4", "13", "0")
    assert "S001 - Ava - 12 Oak St - 021-111" in out
    assert "MTH101 - Maths - Mr. King" in out
    assert "S002 -> ENG101" in out
