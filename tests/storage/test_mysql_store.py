from __future__ import annotations

import mysql.connector
import pytest

from attendance_register.core.exceptions import StorageError
from attendance_register.storage.mysql_store import MySQLKeyValueStore
from attendance_register.students.model import decode_students


class FakeCursor:
    def __init__(self, db: "FakeConnectionFactory"):
        self._db = db
        self._result: list[dict] = []

    def execute(self, sql: str, params=()):
        sql = " ".join(sql.split())
        if self._db.fail_writes and sql.startswith("INSERT"):
            raise mysql.connector.Error("disk full")
        if sql.startswith("SELECT store_value"):
            key = params[0]
            self._result = [{"store_value": self._db.rows[key]}] if key in self._db.rows else []
        elif sql.startswith("SELECT store_key"):
            self._result = [{"store_key": k} for k in sorted(self._db.rows)]
        elif sql.startswith("INSERT INTO kv_store"):
            self._db.pending[params[0]] = params[1]
        else:
            raise AssertionError(f"unexpected SQL: {sql}")

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: "FakeConnectionFactory"):
        self._db = db

    def cursor(self, dictionary=False):
        return FakeCursor(self._db)

    def commit(self):
        self._db.rows.update(self._db.pending)
        self._db.pending.clear()
        self._db.commits += 1

    def rollback(self):
        self._db.pending.clear()

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self):
        self.rows: dict[str, str] = {}
        self.pending: dict[str, str] = {}
        self.commits = 0
        self.fail_writes = False

    def connect(self):
        return FakeConnection(self)


def test_write_commits_and_read_back():
    db = FakeConnectionFactory()
    store = MySQLKeyValueStore(db)

    store.write("attendance", [{"studentId": "a"}])

    assert db.commits >= 1
    assert store.read("attendance", []) == [{"studentId": "a"}]
    assert store.keys() == ["attendance"]


def test_missing_and_corrupt_rows_read_as_default():
    db = FakeConnectionFactory()
    db.rows["students"] = "[{broken"
    store = MySQLKeyValueStore(db)

    assert store.read("attendance", "default") == "default"
    assert store.read("students", [], decoder=decode_students) == []


def test_failed_write_is_rolled_back_and_wrapped():
    db = FakeConnectionFactory()
    db.fail_writes = True
    store = MySQLKeyValueStore(db)

    with pytest.raises(StorageError):
        store.write("students", [])

    assert db.rows == {}
