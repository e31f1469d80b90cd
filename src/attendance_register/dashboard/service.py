from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_WINDOW_MONTHS
from ..students.repository import StudentRepository
from .aggregator import monthly_attendance
from .model import DashboardSummary, MonthlyAttendance


class DashboardService:
    """Recomputes statistics in full on every call from fresh snapshots."""

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        window_months: int = DEFAULT_WINDOW_MONTHS,
    ):
        self._students = students
        self._attendance = attendance
        self._clock = clock
        self._window_months = int(window_months)

    def monthly_stats(self, *, today: Optional[date] = None) -> list[MonthlyAttendance]:
        today = today or self._clock().date()
        return monthly_attendance(
            self._students.list_all(),
            self._attendance.list_all(),
            today=today,
            months=self._window_months,
        )

    def summary(self, *, today: Optional[date] = None) -> DashboardSummary:
        students = self._students.list_all()
        months = self.monthly_stats(today=today)
        return DashboardSummary(
            active_students=sum(1 for s in students if s.is_active),
            total_students=len(students),
            current_month_attendance=months[-1].average_attendance if months else 0.0,
            months=months,
        )
