from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .core.constants import STUDENTS_KEY
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .storage.json_file_store import JsonFileStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .students.model import decode_students
from .students.service import StudentService
from .students.store_student_repository import StoreStudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    students_repo: StoreStudentRepository
    attendance_repo: StoreAttendanceRepository

    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_store(*, backend: str, data_dir: str | Path | None = None, db_config: dict | None = None) -> KeyValueStore:
    backend = (backend or "json").lower()
    if backend == "json":
        if not data_dir:
            raise ValueError("DATA_DIR is required for the json storage backend")
        return JsonFileStore(data_dir)
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown storage backend: {backend!r}")


def reconcile_ledger(store: KeyValueStore, attendance_service: AttendanceService) -> int:
    """Heal a cascade delete that was interrupted between the two writes.

    Skipped when the roster does not load cleanly: an unreadable or missing
    roster would make every attendance record look orphaned.
    """
    unreadable = object()
    roster = store.read(STUDENTS_KEY, unreadable, decoder=decode_students)
    if roster is unreadable:
        logger.warning("Roster could not be loaded, skipping orphan sweep")
        return 0
    return attendance_service.drop_orphans([s.id for s in roster])


def build_container(*, store: KeyValueStore, reconcile: bool = False, window_months: int = 6) -> Container:
    students_repo = StoreStudentRepository(store)
    attendance_repo = StoreAttendanceRepository(store)

    attendance_service = AttendanceService(attendance_repo, students_repo)
    student_service = StudentService(students_repo, attendance_service)
    dashboard_service = DashboardService(students_repo, attendance_repo, window_months=window_months)

    if reconcile:
        reconcile_ledger(store, attendance_service)

    return Container(
        store=store,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        student_service=student_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )


def build_container_from_settings(settings) -> Container:
    store = build_store(
        backend=getattr(settings, "STORAGE_BACKEND", "json"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    return build_container(
        store=store,
        reconcile=bool(getattr(settings, "RECONCILE_ON_START", True)),
        window_months=int(getattr(settings, "WINDOW_MONTHS", 6)),
    )
