from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

import pytest

from attendance_register.container import build_container
from attendance_register.core.enums import Gender, StudentStatus
from attendance_register.storage.codec import dumps, loads_or_default
from attendance_register.students.model import StudentDraft


class InMemoryStore:
    """Keeps serialized payloads so reads go through the same decode path as real stores."""

    def __init__(self):
        self.payloads: dict[str, str] = {}
        self.writes: list[str] = []

    def read(self, key: str, default, *, decoder=None):
        return loads_or_default(key, self.payloads.get(key), default, decoder)

    def write(self, key: str, value: Any) -> None:
        self.payloads[key] = dumps(value)
        self.writes.append(key)

    def keys(self) -> list[str]:
        return sorted(self.payloads)


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


def _build_draft(
    name: str = "Alice",
    *,
    father_name: str = "Robert",
    date_of_birth: Optional[date] = date(2015, 6, 1),
    gender=Gender.FEMALE,
    father_mobile: str = "9876543210",
    mother_mobile: str = "9876543211",
    status=StudentStatus.ACTIVE,
) -> StudentDraft:
    return StudentDraft(
        name=name,
        father_name=father_name,
        date_of_birth=date_of_birth,
        gender=gender,
        father_mobile=father_mobile,
        mother_mobile=mother_mobile,
        status=status,
    )


@pytest.fixture
def make_draft():
    return _build_draft
