from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Optional, TypeVar

from ..core.exceptions import StorageError
from .codec import dumps, loads_or_default
from .repository import Decoder, KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore(KeyValueStore):
    """One ``<key>.json`` file per key inside ``data_dir``.

    Writes go to a temp file in the same directory, are fsynced, then atomically
    replace the target, so a crash leaves either the old or the new value.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)
        self._dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_dir(self) -> Path:
        return self._dir

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def read(self, key: str, default: T, *, decoder: Optional[Decoder] = None) -> T:
        path = self._path_for(key)
        try:
            payload = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default
        except UnicodeDecodeError:
            logger.warning("Stored file for %r is not UTF-8, using default", key)
            return default
        return loads_or_default(key, payload, default, decoder)

    def write(self, key: str, value: Any) -> None:
        path = self._path_for(key)
        payload = dumps(value)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            logger.exception("Failed to write %r to %s", key, path)
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise StorageError(f"Could not persist '{key}'") from e

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self._dir.glob("*.json"))
