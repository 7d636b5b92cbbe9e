from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import KEY_ADVANCES
from ..database.collection import JsonCollection
from ..database.kv_store import KeyValueStore
from .model import AdvanceEntry, AdvanceId
from .repository import AdvanceRepository


def _from_row(row: dict) -> AdvanceEntry:
    return AdvanceEntry(
        entry_id=AdvanceId(str(row["id"])),
        employee_id=str(row["employeeId"]),
        amount=float(row.get("amount") or 0),
        advance_date=parse_iso_date(row["date"]),
        reason=str(row.get("reason") or ""),
        created_at=int(row.get("timestamp") or 0),
        created_by=row.get("createdBy"),
    )


def _to_row(a: AdvanceEntry) -> dict:
    return {
        "id": a.entry_id,
        "employeeId": a.employee_id,
        "amount": a.amount,
        "date": a.advance_date.isoformat(),
        "reason": a.reason,
        "timestamp": a.created_at,
        "createdBy": a.created_by,
    }


class JsonAdvanceRepository(AdvanceRepository):
    def __init__(self, store: KeyValueStore):
        self._rows = JsonCollection(
            store,
            KEY_ADVANCES,
            to_row=_to_row,
            from_row=_from_row,
            id_of=lambda a: a.entry_id,
        )

    def list_all(self) -> Sequence[AdvanceEntry]:
        return self._rows.all()

    def get_by_id(self, entry_id: str) -> Optional[AdvanceEntry]:
        return self._rows.get(entry_id)

    def add(self, entry: AdvanceEntry) -> None:
        self._rows.append(entry)

    def delete_by_id(self, entry_id: str) -> bool:
        return self._rows.remove(entry_id)
