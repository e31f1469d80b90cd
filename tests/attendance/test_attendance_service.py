from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_register.core.enums import AttendanceStatus, StudentStatus
from attendance_register.core.exceptions import ValidationError


MONDAY = date(2024, 3, 4)


def test_set_then_get_returns_non_empty_entries(container):
    ledger = container.attendance_service

    ledger.set_for_date(MONDAY, {"s1": AttendanceStatus.PRESENT, "s2": "Leave", "s3": "", "s4": None})

    assert ledger.get_for_date(MONDAY) == {"s1": AttendanceStatus.PRESENT, "s2": AttendanceStatus.LEAVE}


def test_set_for_date_replaces_whole_day(container):
    ledger = container.attendance_service
    ledger.set_for_date(MONDAY, {"s1": "Present", "s2": "Absent"})

    ledger.set_for_date(MONDAY, {"s2": "Holiday"})

    assert ledger.get_for_date(MONDAY) == {"s2": AttendanceStatus.HOLIDAY}


def test_set_for_date_leaves_other_days_alone(container):
    ledger = container.attendance_service
    tuesday = date(2024, 3, 5)
    ledger.set_for_date(MONDAY, {"s1": "Present"})
    ledger.set_for_date(tuesday, {"s1": "No Class"})

    ledger.set_for_date(MONDAY, {})

    assert ledger.get_for_date(MONDAY) == {}
    assert ledger.get_for_date(tuesday) == {"s1": AttendanceStatus.NO_CLASS}


def test_set_for_date_is_idempotent(container, store):
    ledger = container.attendance_service
    marks = {"s1": "Present", "s2": "Absent"}

    ledger.set_for_date(MONDAY, marks)
    once = store.payloads["attendance"]
    ledger.set_for_date(MONDAY, marks)

    assert store.payloads["attendance"] == once


def test_one_record_per_student_per_day(container):
    ledger = container.attendance_service
    ledger.set_for_date(MONDAY, {"s1": "Present"})
    ledger.set_for_date(datetime(2024, 3, 4, 15, 45), {"s1": "Absent"})

    records = ledger.all_records()
    assert len(records) == 1
    assert records[0].id == "s1-2024-03-04"
    assert records[0].status == AttendanceStatus.ABSENT


def test_time_of_day_is_ignored_on_read(container):
    ledger = container.attendance_service
    ledger.set_for_date(MONDAY, {"s1": "Present"})

    assert ledger.get_for_date(datetime(2024, 3, 4, 23, 59)) == {"s1": AttendanceStatus.PRESENT}


def test_unknown_status_rejected_without_writing(container, store):
    ledger = container.attendance_service
    ledger.set_for_date(MONDAY, {"s1": "Present"})
    before = store.payloads["attendance"]

    with pytest.raises(ValidationError) as exc:
        ledger.set_for_date(MONDAY, {"s1": "Late", "s2": "Present"})

    assert exc.value.errors == {"s1": "Unknown attendance status: Late"}
    assert store.payloads["attendance"] == before


def test_remove_for_student_deletes_every_date(container):
    ledger = container.attendance_service
    for day in range(4, 9):
        ledger.set_for_date(date(2024, 3, day), {"s1": "Present", "s2": "Absent"})

    assert ledger.remove_for_student("s1") == 5

    assert all(r.student_id == "s2" for r in ledger.all_records())
    assert ledger.remove_for_student("s1") == 0


def test_ledger_does_not_filter_by_roster(container):
    # No students at all; marks are still stored as given.
    container.attendance_service.set_for_date(MONDAY, {"unknown": "Present"})

    assert container.attendance_service.get_for_date(MONDAY) == {"unknown": AttendanceStatus.PRESENT}


def test_drop_orphans_removes_records_of_missing_students(container, make_draft):
    alice = container.student_service.add(make_draft("Alice"))
    container.attendance_service.set_for_date(MONDAY, {alice.id: "Present", "gone": "Present"})

    assert container.attendance_service.drop_orphans() == 1
    assert container.attendance_service.get_for_date(MONDAY) == {alice.id: AttendanceStatus.PRESENT}


def test_daily_summary_counts(container):
    ledger = container.attendance_service
    ledger.set_for_date(MONDAY, {"a": "Present", "b": "Present", "c": "Absent", "d": "Leave"})

    summary = ledger.daily_summary(MONDAY)

    assert (summary.total, summary.present, summary.absent) == (4, 2, 1)
    assert summary.by_status == {"Present": 2, "Absent": 1, "Leave": 1, "Holiday": 0, "No Class": 0}


def test_marking_sheet_lists_active_students_by_name(container, make_draft):
    students = container.student_service
    zara = students.add(make_draft("Zara"))
    amit = students.add(make_draft("Amit"))
    students.add(make_draft("Bob", status=StudentStatus.INACTIVE))
    container.attendance_service.set_for_date(MONDAY, {zara.id: "Absent"})

    rows = container.attendance_service.marking_sheet(MONDAY)

    assert [(r.student_id, r.status) for r in rows] == [(amit.id, None), (zara.id, AttendanceStatus.ABSENT)]


def test_blank_status_is_left_out(container):
    ledger = container.attendance_service

    ledger.set_for_date(MONDAY, {"s1": "Present", "s2": "   ", "s3": " Absent "})

    assert ledger.get_for_date(MONDAY) == {"s1": AttendanceStatus.PRESENT, "s3": AttendanceStatus.ABSENT}
