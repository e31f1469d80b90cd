from __future__ import annotations

from datetime import date
from typing import Iterable, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def replace_for_date(self, day: date, records: Iterable[AttendanceRecord]) -> None:
        """Drop every record on ``day`` and store ``records`` in their place."""

        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> int:
        raise NotImplementedError

    def delete_unknown_students(self, known_student_ids: Iterable[str]) -> int:
        raise NotImplementedError
