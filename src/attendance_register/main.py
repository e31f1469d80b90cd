from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container_from_settings
from .core.exceptions import NotFoundError, StorageError, ValidationError
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .responses import error_response
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings=None) -> Flask:
    settings = settings or load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            db_config = getattr(settings, "DB_CONFIG")
            schema_path = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container_from_settings(settings)
        logger.info("Storage backend: %s", backend)

    app.extensions["attendance_register"] = container

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return error_response(str(e), 400, errors=e.errors)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return error_response(str(e), 404)

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        return error_response(str(e), 500)

    register_students(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    return app
