from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import parse_stored_date
from ..core.enums import AttendanceStatus


def make_record_id(student_id: str, day: date) -> str:
    """Natural composite key: one record per student per calendar day."""
    return f"{student_id}-{day.isoformat()}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one calendar day."""

    id: str
    student_id: str
    date: date
    status: AttendanceStatus

    @classmethod
    def for_day(cls, student_id: str, day: date, status: AttendanceStatus) -> "AttendanceRecord":
        return cls(id=make_record_id(student_id, day), student_id=student_id, date=day, status=status)


@dataclass(frozen=True)
class DailyAttendanceSummary:
    """Read-model: counts shown above the marking sheet for one day."""

    date: date
    total: int
    present: int
    absent: int
    by_status: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MarkingSheetRow:
    student_id: str
    name: str
    age: int
    gender: str
    status: Optional[AttendanceStatus] = None


def record_to_dict(r: AttendanceRecord) -> dict[str, Any]:
    return {
        "id": r.id,
        "studentId": r.student_id,
        "date": r.date.isoformat(),
        "status": r.status.value,
    }


def record_from_dict(d: dict[str, Any]) -> AttendanceRecord:
    day = parse_stored_date(d["date"])
    student_id = str(d["studentId"])
    return AttendanceRecord(
        id=str(d.get("id") or make_record_id(student_id, day)),
        student_id=student_id,
        date=day,
        status=AttendanceStatus(d["status"]),
    )


def decode_records(value: Any) -> list[AttendanceRecord]:
    if not isinstance(value, list):
        raise TypeError("attendance payload must be a list")
    return [record_from_dict(d) for d in value]
