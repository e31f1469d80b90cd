"""Monthly attendance roll-up.

Pure functions of (roster snapshot, ledger snapshot, today); nothing here
reads storage or keeps state between calls.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import iter_days, month_bounds, shift_month
from ..core.constants import DEFAULT_WINDOW_MONTHS, WORKING_WEEKDAYS
from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import MonthlyAttendance


def _ratio_half_up(numerator: int, denominator: int, places: int = 0) -> Decimal:
    """Exact numerator/denominator rounded half away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return (Decimal(numerator) / Decimal(denominator)).quantize(quantum, rounding=ROUND_HALF_UP)


def count_working_days(start: date, end: date) -> int:
    return sum(1 for day in iter_days(start, end) if day.weekday() in WORKING_WEEKDAYS)


def attendance_rate(present: int, working_days: int, active_students: int) -> float:
    possible = working_days * active_students
    if possible == 0:
        return 0.0
    return float(_ratio_half_up(present * 100, possible, 1))


def month_window(today: date, months: int = DEFAULT_WINDOW_MONTHS) -> list[tuple[int, int]]:
    """(year, month) pairs ending with ``today``'s month, oldest first."""
    return [shift_month(today.year, today.month, -offset) for offset in range(months - 1, -1, -1)]


def summarize_month(
    year: int,
    month: int,
    *,
    active_students: int,
    records: Iterable[AttendanceRecord],
) -> MonthlyAttendance:
    start, end = month_bounds(year, month)
    working_days = count_working_days(start, end)
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT and start <= r.date <= end)

    return MonthlyAttendance(
        month=month,
        year=year,
        total_students=active_students,
        total_days=working_days,
        average_attendance=attendance_rate(present, working_days, active_students),
        present_days=int(_ratio_half_up(present, max(active_students, 1))),
    )


def monthly_attendance(
    students: Sequence[Student],
    records: Sequence[AttendanceRecord],
    *,
    today: date,
    months: int = DEFAULT_WINDOW_MONTHS,
) -> list[MonthlyAttendance]:
    # Roster status is taken as of now for every month in the window.
    active_students = sum(1 for s in students if s.is_active)
    return [
        summarize_month(year, month, active_students=active_students, records=records)
        for year, month in month_window(today, months)
    ]
