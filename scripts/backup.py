"""Dump every stored collection into one timestamped JSON file.

The admin password is left out of the dump.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.workforce_tracker.workforce_tracker.core.constants import ALL_COLLECTION_KEYS
from src.workforce_tracker.workforce_tracker.database.kv_store import StorageConfig, open_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = open_store(
        StorageConfig(
            backend=str(settings.STORAGE_BACKEND),
            data_dir=str(settings.DATA_DIR),
            db_config=dict(settings.DB_CONFIG),
        )
    )

    dump = {}
    for key in ALL_COLLECTION_KEYS:
        raw = store.get(key)
        dump[key] = json.loads(raw) if raw is not None else None

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"workforce_{ts}.json"
    out_file.write_text(json.dumps(dump, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
