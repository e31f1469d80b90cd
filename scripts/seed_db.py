"""Seed a demo roster and the current week's attendance through the services."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from attendance_register.container import build_container_from_settings
from attendance_register.core.enums import AttendanceStatus, Gender, StudentStatus
from attendance_register.main import load_settings
from attendance_register.students.model import StudentDraft

DEMO_STUDENTS = [
    StudentDraft("Aarav Sharma", "Rakesh Sharma", date(2015, 4, 12), Gender.MALE, "9876543210", "9876543211"),
    StudentDraft("Diya Patel", "Mahesh Patel", date(2014, 9, 3), Gender.FEMALE, "9123456780", "9123456781"),
    StudentDraft("Kabir Singh", "Harpreet Singh", date(2015, 1, 25), Gender.MALE, "9988776655", "9988776654"),
    StudentDraft(
        "Meera Nair", "Suresh Nair", date(2014, 11, 30), Gender.FEMALE, "9000011111", "9000011112",
        status=StudentStatus.INACTIVE,
    ),
]


def main() -> None:
    container = build_container_from_settings(load_settings())
    students = container.student_service
    attendance = container.attendance_service

    existing = {s.name for s in students.list()}
    for draft in DEMO_STUDENTS:
        if draft.name not in existing:
            students.add(draft)

    active = students.active()
    today = date.today()
    monday = today - timedelta(days=today.weekday())
    for offset in range(min(today.weekday(), 4) + 1):
        day = monday + timedelta(days=offset)
        marks = {
            s.id: AttendanceStatus.ABSENT if (i + offset) % 5 == 0 else AttendanceStatus.PRESENT
            for i, s in enumerate(active)
        }
        attendance.set_for_date(day, marks)

    print(f"OK: {len(students.list())} students, {len(attendance.all_records())} attendance records")


if __name__ == "__main__":
    main()
