from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from .model import MonthlyAttendance


def _month_to_dict(m: MonthlyAttendance) -> dict:
    return {
        "month": m.month,
        "label": m.label,
        "year": m.year,
        "totalStudents": m.total_students,
        "totalDays": m.total_days,
        "averageAttendance": m.average_attendance,
        "presentDays": m.present_days,
    }


def register(app: Flask, container: Container) -> None:
    dashboard = container.dashboard_service

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard_view():
        summary = dashboard.summary()
        return jsonify(
            {
                "success": True,
                "activeStudents": summary.active_students,
                "totalStudents": summary.total_students,
                "currentMonthAttendance": summary.current_month_attendance,
                "months": [_month_to_dict(m) for m in summary.months],
            }
        )
