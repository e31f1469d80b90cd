from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_stored_date
from ..core.enums import Gender, StudentStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: one student on the roster.

    Note: ``age`` is a snapshot taken when the record was last submitted; it is
    not recomputed as time passes.
    """

    id: str
    name: str
    father_name: str
    date_of_birth: date
    age: int
    gender: Gender
    father_mobile: str
    mother_mobile: str
    status: StudentStatus
    created_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE

    def with_draft(self, draft: "StudentDraft", *, age: int) -> "Student":
        """Replace every mutable field, keeping ``id`` and ``created_at``."""
        return replace(
            self,
            name=draft.name,
            father_name=draft.father_name,
            date_of_birth=draft.date_of_birth,
            age=age,
            gender=Gender(draft.gender),
            father_mobile=draft.father_mobile,
            mother_mobile=draft.mother_mobile,
            status=StudentStatus(draft.status),
        )


@dataclass(frozen=True)
class StudentDraft:
    """Form data submitted for add/update, before validation."""

    name: str = ""
    father_name: str = ""
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    father_mobile: str = ""
    mother_mobile: str = ""
    status: StudentStatus = StudentStatus.ACTIVE


def student_to_dict(s: Student) -> dict[str, Any]:
    return {
        "id": s.id,
        "name": s.name,
        "fatherName": s.father_name,
        "dateOfBirth": s.date_of_birth.isoformat(),
        "age": s.age,
        "gender": s.gender.value,
        "fatherMobile": s.father_mobile,
        "motherMobile": s.mother_mobile,
        "status": s.status.value,
        "createdAt": s.created_at.isoformat(),
    }


def student_from_dict(d: dict[str, Any]) -> Student:
    return Student(
        id=str(d["id"]),
        name=str(d["name"]),
        father_name=str(d["fatherName"]),
        date_of_birth=parse_stored_date(d["dateOfBirth"]),
        age=int(d["age"]),
        gender=Gender(d["gender"]),
        father_mobile=str(d["fatherMobile"]),
        mother_mobile=str(d["motherMobile"]),
        status=StudentStatus(d["status"]),
        created_at=datetime.fromisoformat(str(d["createdAt"]).replace("Z", "+00:00")),
    )


def decode_students(value: Any) -> list[Student]:
    if not isinstance(value, list):
        raise TypeError("students payload must be a list")
    return [student_from_dict(d) for d in value]
