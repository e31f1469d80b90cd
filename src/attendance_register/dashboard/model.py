from __future__ import annotations

import calendar
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MonthlyAttendance:
    """Derived bucket for one calendar month (never persisted)."""

    month: int
    year: int
    total_students: int
    total_days: int
    average_attendance: float
    present_days: int

    @property
    def label(self) -> str:
        return calendar.month_abbr[self.month]


@dataclass(frozen=True)
class DashboardSummary:
    active_students: int
    total_students: int
    current_month_attendance: float
    months: list[MonthlyAttendance] = field(default_factory=list)
