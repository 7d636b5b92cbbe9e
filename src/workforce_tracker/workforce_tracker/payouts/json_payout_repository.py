from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import KEY_PAYOUTS
from ..core.enums import PaymentMode
from ..database.collection import JsonCollection
from ..database.kv_store import KeyValueStore
from .model import PayoutEntry, PayoutId
from .repository import PayoutRepository


def _from_row(row: dict) -> PayoutEntry:
    return PayoutEntry(
        payout_id=PayoutId(str(row["id"])),
        employee_id=str(row["employeeId"]),
        amount=float(row.get("amount") or 0),
        paid_on=parse_iso_date(row["date"]),
        month=str(row["month"]),
        mode=PaymentMode(row.get("paymentMode") or PaymentMode.BANK.value),
        created_at=int(row.get("timestamp") or 0),
        reference=row.get("reference") or None,
    )


def _to_row(p: PayoutEntry) -> dict:
    return {
        "id": p.payout_id,
        "employeeId": p.employee_id,
        "amount": p.amount,
        "date": p.paid_on.isoformat(),
        "month": p.month,
        "paymentMode": p.mode.value,
        "reference": p.reference,
        "timestamp": p.created_at,
    }


class JsonPayoutRepository(PayoutRepository):
    def __init__(self, store: KeyValueStore):
        self._rows = JsonCollection(
            store,
            KEY_PAYOUTS,
            to_row=_to_row,
            from_row=_from_row,
            id_of=lambda p: p.payout_id,
        )

    def list_all(self) -> Sequence[PayoutEntry]:
        return self._rows.all()

    def get_by_id(self, payout_id: str) -> Optional[PayoutEntry]:
        return self._rows.get(payout_id)

    def add(self, payout: PayoutEntry) -> None:
        self._rows.append(payout)

    def delete_by_id(self, payout_id: str) -> bool:
        return self._rows.remove(payout_id)
