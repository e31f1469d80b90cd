from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    FEMALE = "Female"
    MALE = "Male"
    TRANSGENDER = "Transgender"


class StudentStatus(str, Enum):
    """Only ACTIVE students are offered for attendance marking."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class AttendanceStatus(str, Enum):
    """Daily mark stored in the ledger."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"
    HOLIDAY = "Holiday"
    NO_CLASS = "No Class"
