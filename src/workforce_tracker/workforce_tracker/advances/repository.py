from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AdvanceEntry


class AdvanceRepository(Protocol):
    def list_all(self) -> Sequence[AdvanceEntry]:
        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[AdvanceEntry]:
        raise NotImplementedError

    def add(self, entry: AdvanceEntry) -> None:
        raise NotImplementedError

    def delete_by_id(self, entry_id: str) -> bool:
        raise NotImplementedError
