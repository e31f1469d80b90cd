from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Sequence

from ..core.constants import ATTENDANCE_KEY
from ..storage.repository import KeyValueStore
from .model import AttendanceRecord, decode_records, record_to_dict
from .repository import AttendanceRepository


class StoreAttendanceRepository(AttendanceRepository):
    """Ledger kept as one ordered list under the ``attendance`` key."""

    def __init__(self, store: KeyValueStore, *, key: str = ATTENDANCE_KEY):
        self._store = store
        self._key = key

    def _load(self) -> list[AttendanceRecord]:
        return self._store.read(self._key, [], decoder=decode_records)

    def _save(self, records: Sequence[AttendanceRecord]) -> None:
        self._store.write(self._key, [record_to_dict(r) for r in records])

    def _delete_where(self, predicate: Callable[[AttendanceRecord], bool]) -> int:
        records = self._load()
        kept = [r for r in records if not predicate(r)]
        removed = len(records) - len(kept)
        if removed:
            self._save(kept)
        return removed

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._load()

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._load() if r.date == day]

    def replace_for_date(self, day: date, records: Iterable[AttendanceRecord]) -> None:
        kept = [r for r in self._load() if r.date != day]
        kept.extend(records)
        self._save(kept)

    def delete_for_student(self, student_id: str) -> int:
        return self._delete_where(lambda r: r.student_id == student_id)

    def delete_unknown_students(self, known_student_ids: Iterable[str]) -> int:
        known = set(known_student_ids)
        return self._delete_where(lambda r: r.student_id not in known)
