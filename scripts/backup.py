"""Backup every stored collection into one timestamped JSON file.

Note: works with either storage backend since it only goes through the store.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from attendance_register.container import build_store
from attendance_register.main import load_settings


def main() -> None:
    settings = load_settings()
    store = build_store(
        backend=getattr(settings, "STORAGE_BACKEND", "json"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_register_{ts}.json"

    snapshot = {key: store.read(key, None) for key in store.keys()}
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
