"""Durable key-value storage for JSON collections.

Each collection is stored whole under one key; there is no partial update.
Three backends share the `KeyValueStore` interface: in-memory (tests), a
directory of JSON files (default) and a MySQL table (see mysql_kv_store).
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileKeyValueStore(KeyValueStore):
    """One `<key>.json` file per key inside `data_dir`."""

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)


@dataclass
class StorageConfig:
    backend: str = "file"
    data_dir: str = "instance/data"
    db_config: dict = field(default_factory=dict)


def open_store(config: StorageConfig) -> KeyValueStore:
    backend = (config.backend or "file").lower()
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "file":
        logger.info("Using file storage at %s", config.data_dir)
        return FileKeyValueStore(config.data_dir)
    if backend == "mysql":
        from .connection import DBConfig, DatabaseConnection
        from .mysql_kv_store import MySQLKeyValueStore

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(config.db_config))
        logger.info("Using MySQL storage at %s", conn.config.label)
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown storage backend: {config.backend!r}")
