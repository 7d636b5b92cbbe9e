from __future__ import annotations

from typing import Protocol

from ..core.constants import DEFAULT_ADMIN_PASSWORD, KEY_ADMIN_PASSWORD
from ..database.kv_store import KeyValueStore


class AdminCredentialRepository(Protocol):
    def get_password(self) -> str:
        raise NotImplementedError

    def set_password(self, password: str) -> None:
        raise NotImplementedError


class KVAdminCredentialRepository(AdminCredentialRepository):
    """Admin password kept as a plain string value (no hashing)."""

    def __init__(self, store: KeyValueStore, *, default_password: str = DEFAULT_ADMIN_PASSWORD):
        self._store = store
        self._default = default_password

    def get_password(self) -> str:
        return self._store.get(KEY_ADMIN_PASSWORD) or self._default

    def set_password(self, password: str) -> None:
        self._store.set(KEY_ADMIN_PASSWORD, password)
