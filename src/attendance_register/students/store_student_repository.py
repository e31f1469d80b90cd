from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import STUDENTS_KEY
from ..storage.repository import KeyValueStore
from .model import Student, decode_students, student_to_dict
from .repository import StudentRepository


class StoreStudentRepository(StudentRepository):
    """Roster kept as one ordered list under the ``students`` key."""

    def __init__(self, store: KeyValueStore, *, key: str = STUDENTS_KEY):
        self._store = store
        self._key = key

    def _load(self) -> list[Student]:
        return self._store.read(self._key, [], decoder=decode_students)

    def _save(self, students: Sequence[Student]) -> None:
        self._store.write(self._key, [student_to_dict(s) for s in students])

    def list_all(self) -> Sequence[Student]:
        return self._load()

    def get_by_id(self, student_id: str) -> Optional[Student]:
        for s in self._load():
            if s.id == student_id:
                return s
        return None

    def insert(self, student: Student) -> None:
        students = self._load()
        if any(s.id == student.id for s in students):
            raise ValueError(f"Duplicate student id: {student.id}")
        students.append(student)
        self._save(students)

    def replace(self, student: Student) -> bool:
        students = self._load()
        for i, s in enumerate(students):
            if s.id == student.id:
                students[i] = student
                self._save(students)
                return True
        return False

    def delete_by_id(self, student_id: str) -> bool:
        students = self._load()
        kept = [s for s in students if s.id != student_id]
        if len(kept) == len(students):
            return False
        self._save(kept)
        return True
