from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayoutEntry


class PayoutRepository(Protocol):
    def list_all(self) -> Sequence[PayoutEntry]:
        raise NotImplementedError

    def get_by_id(self, payout_id: str) -> Optional[PayoutEntry]:
        raise NotImplementedError

    def add(self, payout: PayoutEntry) -> None:
        raise NotImplementedError

    def delete_by_id(self, payout_id: str) -> bool:
        raise NotImplementedError
