from __future__ import annotations

import logging
from collections import Counter
from datetime import date, datetime
from typing import Iterable, Mapping, Optional, Union

from ..common.datetime_utils import as_calendar_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord, DailyAttendanceSummary, MarkingSheetRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

StatusInput = Union[AttendanceStatus, str, None]


def _coerce_status(value: StatusInput) -> Optional[AttendanceStatus]:
    if isinstance(value, AttendanceStatus):
        return value
    text = str(value).strip() if value is not None else ""
    if not text:
        return None
    return AttendanceStatus(text)


class AttendanceService:
    """Use cases of the attendance ledger.

    The ledger does not look at roster status; only ``marking_sheet`` consults
    the student repository to decide who is offered for marking.
    """

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def get_for_date(self, day: date | datetime) -> dict[str, AttendanceStatus]:
        day = as_calendar_date(day)
        return {r.student_id: r.status for r in self._attendance.list_for_date(day)}

    def set_for_date(self, day: date | datetime, statuses: Mapping[str, StatusInput]) -> dict[str, AttendanceStatus]:
        """Full-day upsert: whatever was stored for ``day`` is replaced by ``statuses``.

        Entries with an empty status are left out. Returns what was stored.
        """
        day = as_calendar_date(day)

        parsed: dict[str, AttendanceStatus] = {}
        errors: dict[str, str] = {}
        for student_id, raw in statuses.items():
            try:
                status = _coerce_status(raw)
            except ValueError:
                errors[str(student_id)] = f"Unknown attendance status: {raw}"
                continue
            if status is not None:
                parsed[str(student_id)] = status

        if errors:
            raise ValidationError("Invalid attendance status", errors)

        records = [AttendanceRecord.for_day(sid, day, status) for sid, status in parsed.items()]
        self._attendance.replace_for_date(day, records)
        logger.info("Saved attendance for %s (%d marks)", day.isoformat(), len(records))
        return parsed

    def remove_for_student(self, student_id: str) -> int:
        removed = self._attendance.delete_for_student(student_id)
        if removed:
            logger.info("Removed %d attendance records of student %s", removed, student_id)
        return removed

    def drop_orphans(self, known_student_ids: Optional[Iterable[str]] = None) -> int:
        """Remove records whose student is no longer on the roster."""
        if known_student_ids is None:
            known_student_ids = [s.id for s in self._students.list_all()]
        removed = self._attendance.delete_unknown_students(known_student_ids)
        if removed:
            logger.warning("Dropped %d orphaned attendance records", removed)
        return removed

    def all_records(self) -> list[AttendanceRecord]:
        return list(self._attendance.list_all())

    def daily_summary(self, day: date | datetime) -> DailyAttendanceSummary:
        day = as_calendar_date(day)
        marks = self.get_for_date(day)
        counts = Counter(marks.values())
        return DailyAttendanceSummary(
            date=day,
            total=len(marks),
            present=counts[AttendanceStatus.PRESENT],
            absent=counts[AttendanceStatus.ABSENT],
            by_status={s.value: counts[s] for s in AttendanceStatus},
        )

    def marking_sheet(self, day: date | datetime) -> list[MarkingSheetRow]:
        marks = self.get_for_date(day)
        active = sorted(
            (s for s in self._students.list_all() if s.is_active),
            key=lambda s: s.name.casefold(),
        )
        return [
            MarkingSheetRow(
                student_id=s.id,
                name=s.name,
                age=s.age,
                gender=s.gender.value,
                status=marks.get(s.id),
            )
            for s in active
        ]
