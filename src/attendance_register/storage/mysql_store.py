from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import transaction
from .codec import dumps, loads_or_default
from .repository import Decoder, KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MySQLKeyValueStore(KeyValueStore):
    """Key-value rows in the ``kv_store`` table (see database/schema.sql).

    Each write commits before returning; there is no batching across keys.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def read(self, key: str, default: T, *, decoder: Optional[Decoder] = None) -> T:
        with transaction(self._conn_factory) as cur:
            cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
            r = cur.fetchone()
        payload = r["store_value"] if r else None
        if isinstance(payload, (bytes, bytearray)):
            payload = payload.decode("utf-8", errors="replace")
        return loads_or_default(key, payload, default, decoder)

    def write(self, key: str, value: Any) -> None:
        payload = dumps(value)
        try:
            with transaction(self._conn_factory) as cur:
                cur.execute(
                    """
                    INSERT INTO kv_store(store_key, store_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                    """,
                    (key, payload),
                )
        except mysql.connector.Error as e:
            logger.exception("Failed to write %r to kv_store", key)
            raise StorageError(f"Could not persist '{key}'") from e

    def keys(self) -> list[str]:
        with transaction(self._conn_factory) as cur:
            cur.execute("SELECT store_key FROM kv_store ORDER BY store_key")
            return [r["store_key"] for r in cur.fetchall()]
