from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import ValidationError
from ..responses import date_from_url, json_object_body, plain
from .model import DailyAttendanceSummary, MarkingSheetRow


def _summary_to_dict(s: DailyAttendanceSummary) -> dict:
    return {
        "date": s.date.isoformat(),
        "total": s.total,
        "present": s.present,
        "absent": s.absent,
        "byStatus": dict(s.by_status),
    }


def _row_to_dict(r: MarkingSheetRow) -> dict:
    return {
        "studentId": r.student_id,
        "name": r.name,
        "age": r.age,
        "gender": r.gender,
        "status": r.status.value if r.status else None,
    }


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    def _day_view(day):
        return {
            "success": True,
            "date": day.isoformat(),
            "attendance": plain(attendance.get_for_date(day)),
            "summary": _summary_to_dict(attendance.daily_summary(day)),
            "students": [_row_to_dict(r) for r in attendance.marking_sheet(day)],
        }

    @app.route("/api/attendance/<day>", methods=["GET"], endpoint="attendance_for_date")
    def attendance_for_date(day: str):
        return jsonify(_day_view(date_from_url(day)))

    @app.route("/api/attendance/<day>", methods=["PUT"], endpoint="attendance_save")
    def attendance_save(day: str):
        work_date = date_from_url(day)
        payload = json_object_body()
        statuses = payload.get("attendance", payload)
        if not isinstance(statuses, dict):
            raise ValidationError("Invalid attendance payload", {"attendance": "Expected an object of studentId -> status"})
        attendance.set_for_date(work_date, statuses)
        return jsonify(_day_view(work_date))
