from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): the service layer depends on this interface, not on a concrete
    storage backend.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def insert(self, student: Student) -> None:
        raise NotImplementedError

    def replace(self, student: Student) -> bool:
        """Overwrite the stored record with the same id; False if unknown."""

        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
