"""Small JSON helpers shared by the controllers."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional

from flask import jsonify, request

from .common.datetime_utils import parse_iso_date
from .core.exceptions import ValidationError


def error_response(message: str, status: int, *, errors: Optional[dict] = None):
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def date_from_url(value: str) -> date:
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Invalid date", {"date": "Date must be YYYY-MM-DD"})


def plain(value: Any) -> Any:
    """Dataclasses/enums/dates to JSON-friendly values."""
    if is_dataclass(value):
        return plain(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [plain(v) for v in value]
    return value


def json_object_body() -> dict:
    """Request JSON as a dict; an empty body counts as ``{}``."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Invalid request body", {"body": "Expected a JSON object"})
    return payload
