from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def add(self, entry: AttendanceEntry) -> None:
        raise NotImplementedError

    def delete_by_id(self, entry_id: str) -> bool:
        raise NotImplementedError
