from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from attendance_register.attendance.model import AttendanceRecord, decode_records, record_to_dict
from attendance_register.core.enums import AttendanceStatus, Gender, StudentStatus
from attendance_register.storage.json_file_store import JsonFileStore
from attendance_register.students.model import Student, decode_students, student_to_dict


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(tmp_path / "data")


def test_missing_key_returns_default(file_store):
    assert file_store.read("students", []) == []


def test_write_then_read(file_store):
    file_store.write("students", [{"id": "1", "name": "Alice"}])

    assert file_store.read("students", []) == [{"id": "1", "name": "Alice"}]
    assert file_store.keys() == ["students"]


def test_write_overwrites_whole_value(file_store):
    file_store.write("attendance", [1, 2, 3])
    file_store.write("attendance", [4])

    assert file_store.read("attendance", None) == [4]


def test_write_leaves_no_temp_files(file_store):
    file_store.write("students", [])

    assert sorted(p.name for p in file_store.data_dir.iterdir()) == ["students.json"]


def test_corrupt_json_reads_as_default(file_store):
    (file_store.data_dir / "students.json").write_text("{not json", encoding="utf-8")

    assert file_store.read("students", ["fallback"]) == ["fallback"]


def test_wrong_shape_reads_as_default(file_store):
    file_store.write("students", [{"id": "1"}])

    assert file_store.read("students", [], decoder=decode_students) == []


def test_invalid_key_rejected(file_store):
    with pytest.raises(ValueError):
        file_store.write("../escape", [])


def test_student_round_trip(file_store):
    student = Student(
        id="abc",
        name="Alice",
        father_name="Robert",
        date_of_birth=date(2015, 6, 1),
        age=8,
        gender=Gender.TRANSGENDER,
        father_mobile="9876543210",
        mother_mobile="9876543211",
        status=StudentStatus.INACTIVE,
        created_at=datetime(2024, 3, 15, 9, 30, 12, 345000),
    )

    file_store.write("students", [student_to_dict(student)])

    assert file_store.read("students", [], decoder=decode_students) == [student]


def test_attendance_round_trip_uses_iso_dates(file_store):
    record = AttendanceRecord.for_day("abc", date(2024, 3, 15), AttendanceStatus.NO_CLASS)

    file_store.write("attendance", [record_to_dict(record)])

    raw = json.loads((file_store.data_dir / "attendance.json").read_text(encoding="utf-8"))
    assert raw == [{"id": "abc-2024-03-15", "studentId": "abc", "date": "2024-03-15", "status": "No Class"}]
    assert file_store.read("attendance", [], decoder=decode_records) == [record]


def test_full_timestamp_dates_are_read_by_day(file_store):
    file_store.write(
        "attendance",
        [{"id": "x-2024-03-15", "studentId": "x", "date": "2024-03-15T00:00:00.000Z", "status": "Present"}],
    )

    records = file_store.read("attendance", [], decoder=decode_records)

    assert records[0].date == date(2024, 3, 15)
