"""
Interactive main menu.

Each numbered action collects its input through the prompt helpers, hands
the validated values to ``RecordService`` and prints the one-line outcome.
Actions return the ``InputCtl`` of the step that ended them: Back at any
field returns before anything is written, Exit ends the session.
"""

import logging
from typing import Callable, Dict, Iterable

from studentms.cli import render
from studentms.cli.prompts import InputCtl, Prompter
from studentms.core.validation import (
    MARK_MAX,
    MARK_MIN,
    is_non_empty_short,
    is_valid_course_code,
    is_valid_name,
    is_valid_phone,
    is_valid_roll,
)
from studentms.schemas.course import CourseCreate, CourseUpdate
from studentms.schemas.student import StudentCreate, StudentUpdate
from studentms.services.sync import RecordService, SyncResult

logger = logging.getLogger(__name__)

ROLL_ERROR = "Invalid roll no. Use S + 3-6 digits (e.g. S001)."
NAME_ERROR = "Invalid name. Letters/spaces only (2-40)."
PHONE_ERROR = "Invalid NZ phone."
CODE_ERROR = "Invalid code. 3 letters + 3 digits."
SHORT_ERROR = "Required (max 60 chars)."

OK = InputCtl.OK


class Menu:
    def __init__(self, service: RecordService, prompter: Prompter, title: str = "Student Management System"):
        self.service = service
        self.cache = service.cache
        self.prompter = prompter
        self.title = title
        self.actions: Dict[int, Callable[[], InputCtl]] = {
            1: self.add_student,
            2: self.view_students,
            3: self.add_course,
            4: self.view_courses,
            5: self.enroll,
            6: self.enter_marks,
            7: self.student_report,
            8: self.edit_student,
            9: self.edit_course,
            10: self.delete_student,
            11: self.delete_course,
            12: self.delete_enrollment,
            13: self.view_enrollments,
        }

    # ==========================
    # Loop
    # ==========================

    def run(self) -> None:
        """Show the menu until the user picks 0 or exits from a prompt."""
        self._print(render.welcome(self.title))
        while True:
            self._print(render.main_menu(*self.service.counts()))
            raw = self.prompter.read_line("  CHOICE: ")
            if raw is None:
                break
            try:
                choice = int(raw)
            except ValueError:
                continue
            if choice == 0:
                break
            action = self.actions.get(choice)
            if action is None:
                self.prompter.say("Unknown option.")
                continue
            if action() is InputCtl.EXIT:
                break
        logger.info("Menu loop finished")

    # ==========================
    # Helpers
    # ==========================

    def _print(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.prompter.say(line)

    def _done(self, result: SyncResult) -> InputCtl:
        self.prompter.say(result.message)
        return OK

    def _stop(self, message: str) -> InputCtl:
        self.prompter.say(message)
        return OK

    # ==========================
    # Students
    # ==========================

    def add_student(self) -> InputCtl:
        p = self.prompter
        roll = p.until_valid_or_back("Roll No (e.g. S001)", is_valid_roll, ROLL_ERROR)
        if not roll.ok:
            return roll.ctl
        if self.cache.exists_student(roll.value):
            return self._stop("That roll is already used.")

        name = p.until_valid_or_back("Name", is_valid_name, NAME_ERROR)
        if not name.ok:
            return name.ctl
        address = p.until_valid_or_back("Address", is_non_empty_short, "Address required (max 60 chars).")
        if not address.ok:
            return address.ctl
        contact = p.until_valid_or_back("Contact (NZ phone)", is_valid_phone, PHONE_ERROR)
        if not contact.ok:
            return contact.ctl

        return self._done(self.service.add_student(StudentCreate(
            roll_no=roll.value, name=name.value, address=address.value, contact=contact.value
        )))

    def view_students(self) -> InputCtl:
        self._print(render.students_table(self.cache.all_students()))
        return OK

    def edit_student(self) -> InputCtl:
        p = self.prompter
        roll = p.until_valid_or_back("Roll No to edit", is_valid_roll, "Invalid roll.")
        if not roll.ok:
            return roll.ctl
        current = self.cache.get_student(roll.value)
        if current is None:
            return self._stop("Student not found.")

        name = p.edit_string("Name", current.name, is_valid_name, NAME_ERROR)
        if not name.ok:
            return name.ctl
        address = p.edit_string("Address", current.address or "", is_non_empty_short, SHORT_ERROR)
        if not address.ok:
            return address.ctl
        contact = p.edit_string("Contact (NZ phone)", current.contact or "", is_valid_phone, PHONE_ERROR)
        if not contact.ok:
            return contact.ctl

        # Kept values are taken as stored, even if they predate the input rules
        update = StudentUpdate.model_construct(
            roll_no=current.roll_no, name=name.value, address=address.value, contact=contact.value
        )
        return self._done(self.service.update_student(update))

    def delete_student(self) -> InputCtl:
        roll = self.prompter.until_valid_or_back("Roll No to delete", is_valid_roll, "Invalid roll.")
        if not roll.ok:
            return roll.ctl
        if not self.cache.exists_student(roll.value):
            return self._stop("Student not found.")
        sure = self.prompter.confirm_or_back("Delete student and all their grades?")
        if not sure.ok:
            return sure.ctl
        return self._done(self.service.delete_student(roll.value))

    # ==========================
    # Courses
    # ==========================

    def add_course(self) -> InputCtl:
        p = self.prompter
        code = p.until_valid_or_back("Code (e.g. ENG101)", is_valid_course_code, CODE_ERROR)
        if not code.ok:
            return code.ctl
        if self.cache.exists_course(code.value):
            return self._stop("Course code already exists.")

        title = p.until_valid_or_back("Title", is_non_empty_short, "Title required (max 60).")
        if not title.ok:
            return title.ctl
        description = p.until_valid_or_back("Description", is_non_empty_short, "Description required (max 60).")
        if not description.ok:
            return description.ctl
        teacher = p.until_valid_or_back("Teacher", is_valid_name, "Letters/spaces only.")
        if not teacher.ok:
            return teacher.ctl

        return self._done(self.service.add_course(CourseCreate(
            code=code.value, title=title.value, description=description.value, teacher=teacher.value
        )))

    def view_courses(self) -> InputCtl:
        self._print(render.courses_table(self.cache.all_courses()))
        return OK

    def edit_course(self) -> InputCtl:
        p = self.prompter
        code = p.until_valid_or_back("Course Code to edit", is_valid_course_code, "Invalid code.")
        if not code.ok:
            return code.ctl
        current = self.cache.get_course(code.value)
        if current is None:
            return self._stop("Course not found.")

        title = p.edit_string("Title", current.title, is_non_empty_short, SHORT_ERROR)
        if not title.ok:
            return title.ctl
        description = p.edit_string("Description", current.description or "", is_non_empty_short, SHORT_ERROR)
        if not description.ok:
            return description.ctl
        teacher = p.edit_string("Teacher", current.teacher or "", is_valid_name, "Letters/spaces only.")
        if not teacher.ok:
            return teacher.ctl

        update = CourseUpdate.model_construct(
            code=current.code, title=title.value, description=description.value, teacher=teacher.value
        )
        return self._done(self.service.update_course(update))

    def delete_course(self) -> InputCtl:
        code = self.prompter.until_valid_or_back("Course Code to delete", is_valid_course_code, "Invalid code.")
        if not code.ok:
            return code.ctl
        if not self.cache.exists_course(code.value):
            return self._stop("Course not found.")
        sure = self.prompter.confirm_or_back("Delete course and all associated grades?")
        if not sure.ok:
            return sure.ctl
        return self._done(self.service.delete_course(code.value))

    # ==========================
    # Enrollments
    # ==========================

    def _pair(self):
        """Ask for roll and course code. Returns (ctl, roll, code)."""
        roll = self.prompter.until_valid_or_back("Roll No", is_valid_roll, "Invalid roll.")
        if not roll.ok:
            return roll.ctl, None, None
        code = self.prompter.until_valid_or_back("Course Code", is_valid_course_code, "Invalid code.")
        if not code.ok:
            return code.ctl, None, None
        return OK, roll.value, code.value

    def enroll(self) -> InputCtl:
        ctl, roll, code = self._pair()
        if ctl is not OK:
            return ctl
        return self._done(self.service.enroll(roll, code))

    def enter_marks(self) -> InputCtl:
        ctl, roll, code = self._pair()
        if ctl is not OK:
            return ctl
        if not self.cache.already_enrolled(roll, code):
            return self._stop("Not enrolled in that course.")

        internal = self.prompter.number_or_back("Internal mark", MARK_MIN, MARK_MAX)
        if not internal.ok:
            return internal.ctl
        final = self.prompter.number_or_back("Final mark", MARK_MIN, MARK_MAX)
        if not final.ok:
            return final.ctl
        return self._done(self.service.enter_marks(roll, code, internal.value, final.value))

    def delete_enrollment(self) -> InputCtl:
        ctl, roll, code = self._pair()
        if ctl is not OK:
            return ctl
        if not self.cache.already_enrolled(roll, code):
            return self._stop("Not enrolled in that course.")
        sure = self.prompter.confirm_or_back("Delete this enrollment?")
        if not sure.ok:
            return sure.ctl
        return self._done(self.service.delete_enrollment(roll, code))

    def view_enrollments(self) -> InputCtl:
        self._print(render.enrollments_table(self.cache.all_grades()))
        return OK

    # ==========================
    # Reports
    # ==========================

    def student_report(self) -> InputCtl:
        roll = self.prompter.read_line("Roll No: ")
        if roll is None:
            return InputCtl.EXIT
        self._print(render.student_report(self.service.student_report(roll)))
        return OK
