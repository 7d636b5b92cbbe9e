from __future__ import annotations

import json
import logging
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCollection(Generic[T]):
    """In-memory list mirrored to a single key of a KeyValueStore.

    The whole collection is read once at construction and written back in
    full after every mutation. Last writer wins.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        to_row: Callable[[T], dict],
        from_row: Callable[[dict], T],
        id_of: Callable[[T], str],
        default: Optional[Callable[[], Iterable[T]]] = None,
    ):
        self._store = store
        self._key = key
        self._to_row = to_row
        self._from_row = from_row
        self._id_of = id_of
        self._items: List[T] = self._load(default)

    def _load(self, default: Optional[Callable[[], Iterable[T]]]) -> List[T]:
        raw = self._store.get(self._key)
        if raw is None:
            items = list(default()) if default else []
            if items:
                logger.info("Seeding %s with %d default records", self._key, len(items))
                self._flush(items)
            return items

        rows = json.loads(raw)
        if not isinstance(rows, list):
            raise ValueError(f"Stored collection {self._key!r} is not a JSON array")
        return [self._from_row(r) for r in rows]

    def _flush(self, items: List[T]) -> None:
        self._store.set(self._key, json.dumps([self._to_row(i) for i in items], ensure_ascii=False))

    def all(self) -> List[T]:
        return list(self._items)

    def get(self, item_id: str) -> Optional[T]:
        for item in self._items:
            if self._id_of(item) == item_id:
                return item
        return None

    def _commit(self, items: List[T]) -> None:
        # Memory only follows a successful write.
        self._flush(items)
        self._items = items

    def append(self, item: T) -> None:
        self._commit(self._items + [item])

    def replace(self, item: T) -> bool:
        item_id = self._id_of(item)
        if self.get(item_id) is None:
            return False
        self._commit([item if self._id_of(i) == item_id else i for i in self._items])
        return True

    def remove(self, item_id: str) -> bool:
        kept = [i for i in self._items if self._id_of(i) != item_id]
        if len(kept) == len(self._items):
            return False
        self._commit(kept)
        return True

    def __len__(self) -> int:
        return len(self._items)
