from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NewType, Optional

from ..core.enums import PaymentMode

PayoutId = NewType("PayoutId", str)


@dataclass(frozen=True)
class PayoutEntry:
    """Domain entity: a salary disbursement reconciling one payroll month."""

    payout_id: PayoutId
    employee_id: str
    amount: float
    paid_on: date
    month: str
    mode: PaymentMode
    created_at: int
    reference: Optional[str] = None
