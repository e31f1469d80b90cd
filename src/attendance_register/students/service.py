from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local, whole_years_between
from ..common.validators import clean_text, mobile_error, non_empty_error
from ..core.enums import Gender, StudentStatus
from ..core.exceptions import ValidationError
from .model import Student, StudentDraft
from .repository import StudentRepository

logger = logging.getLogger(__name__)

INVALID_GENDER_MESSAGE = "Gender must be Female, Male or Transgender"


def sort_by_name(students) -> list[Student]:
    return sorted(students, key=lambda s: s.name.casefold())


def validate_draft(draft: StudentDraft) -> dict[str, str]:
    """Collect every field error of a draft (empty dict means valid)."""
    errors: dict[str, str] = {}

    checks = {
        "name": non_empty_error(draft.name, "Student name is required"),
        "dateOfBirth": None if draft.date_of_birth else "Date of birth is required",
        "gender": None if draft.gender else "Gender is required",
        "fatherName": non_empty_error(draft.father_name, "Father's name is required"),
        "fatherMobile": mobile_error(draft.father_mobile, "Father's mobile is required"),
        "motherMobile": mobile_error(draft.mother_mobile, "Mother's mobile is required"),
    }
    for field_name, message in checks.items():
        if message:
            errors[field_name] = message

    if draft.gender and not isinstance(draft.gender, Gender):
        try:
            Gender(draft.gender)
        except ValueError:
            errors["gender"] = INVALID_GENDER_MESSAGE

    if draft.status and not isinstance(draft.status, StudentStatus):
        try:
            StudentStatus(draft.status)
        except ValueError:
            errors["status"] = "Status must be Active or Inactive"

    return errors


def _normalize(draft: StudentDraft) -> StudentDraft:
    return StudentDraft(
        name=clean_text(draft.name),
        father_name=clean_text(draft.father_name),
        date_of_birth=draft.date_of_birth,
        gender=Gender(draft.gender),
        father_mobile=clean_text(draft.father_mobile),
        mother_mobile=clean_text(draft.mother_mobile),
        status=StudentStatus(draft.status or StudentStatus.ACTIVE),
    )


class StudentService:
    """Use case: manage the roster.

    Removing a student cascades to the attendance ledger. The ledger is cleaned
    first so an interruption can never leave marks pointing at a deleted id.
    """

    def __init__(
        self,
        students: StudentRepository,
        ledger: AttendanceService,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._students = students
        self._ledger = ledger
        self._clock = clock
        self._id_factory = id_factory

    def _validated(self, draft: StudentDraft) -> StudentDraft:
        errors = validate_draft(draft)
        if errors:
            raise ValidationError("Student form has errors", errors)
        return _normalize(draft)

    def _age_today(self, date_of_birth: date) -> int:
        return whole_years_between(date_of_birth, self._clock().date())

    def _new_id(self) -> str:
        taken = {s.id for s in self._students.list_all()}
        new_id = self._id_factory()
        while new_id in taken:
            new_id = self._id_factory()
        return new_id

    def list(self) -> list[Student]:
        return sort_by_name(self._students.list_all())

    def active(self) -> list[Student]:
        return [s for s in self.list() if s.is_active]

    def get(self, student_id: str) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def search(self, term: str) -> list[Student]:
        needle = clean_text(term).casefold()
        if not needle:
            return self.list()
        return sort_by_name(
            s
            for s in self._students.list_all()
            if needle in s.name.casefold() or needle in s.father_name.casefold()
        )

    def add(self, draft: StudentDraft) -> Student:
        draft = self._validated(draft)
        student = Student(
            id=self._new_id(),
            name=draft.name,
            father_name=draft.father_name,
            date_of_birth=draft.date_of_birth,
            age=self._age_today(draft.date_of_birth),
            gender=draft.gender,
            father_mobile=draft.father_mobile,
            mother_mobile=draft.mother_mobile,
            status=draft.status,
            created_at=self._clock(),
        )
        self._students.insert(student)
        logger.info("Added student %s (%s)", student.id, student.name)
        return student

    def update(self, student_id: str, draft: StudentDraft) -> Optional[Student]:
        """Replace the mutable fields; an unknown id is a silent no-op (None)."""
        draft = self._validated(draft)

        current = self._students.get_by_id(student_id)
        if not current:
            return None

        updated = current.with_draft(draft, age=self._age_today(draft.date_of_birth))
        if not self._students.replace(updated):
            return None
        logger.info("Updated student %s", student_id)
        return updated

    def remove(self, student_id: str) -> None:
        removed_marks = self._ledger.remove_for_student(student_id)
        if self._students.delete_by_id(student_id):
            logger.info("Removed student %s and %d attendance records", student_id, removed_marks)
