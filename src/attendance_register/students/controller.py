from __future__ import annotations

from datetime import date
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_stored_date
from ..container import Container
from ..core.enums import Gender, StudentStatus
from ..core.exceptions import NotFoundError
from ..responses import json_object_body
from .model import StudentDraft, student_to_dict


def _optional_date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_stored_date(value)
    except ValueError:
        return None


def _optional_enum(enum_cls, value: Any):
    try:
        return enum_cls(value) if value else None
    except ValueError:
        return value


def draft_from_payload(payload: dict) -> StudentDraft:
    """Build a draft from the JSON form (camelCase keys); the service validates it."""
    return StudentDraft(
        name=str(payload.get("name") or ""),
        father_name=str(payload.get("fatherName") or ""),
        date_of_birth=_optional_date(payload.get("dateOfBirth")),
        gender=_optional_enum(Gender, payload.get("gender")),
        father_mobile=str(payload.get("fatherMobile") or ""),
        mother_mobile=str(payload.get("motherMobile") or ""),
        status=_optional_enum(StudentStatus, payload.get("status")) or StudentStatus.ACTIVE,
    )


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        term = request.args.get("q", "")
        rows = students.search(term) if term else students.list()
        return jsonify({"success": True, "students": [student_to_dict(s) for s in rows]})

    @app.route("/api/students", methods=["POST"], endpoint="students_add")
    def students_add():
        payload = json_object_body()
        student = students.add(draft_from_payload(payload))
        return jsonify({"success": True, "student": student_to_dict(student)}), 201

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="students_get")
    def students_get(student_id: str):
        student = students.get(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return jsonify({"success": True, "student": student_to_dict(student)})

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="students_update")
    def students_update(student_id: str):
        payload = json_object_body()
        student = students.update(student_id, draft_from_payload(payload))
        # Unknown ids are a no-op, not an error.
        return jsonify({"success": True, "student": student_to_dict(student) if student else None})

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="students_remove")
    def students_remove(student_id: str):
        students.remove(student_id)
        return jsonify({"success": True})

    @app.route("/api/students/active", methods=["GET"], endpoint="students_active")
    def students_active():
        return jsonify({"success": True, "students": [student_to_dict(s) for s in students.active()]})
