from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NewType, Optional

AdvanceId = NewType("AdvanceId", str)


@dataclass(frozen=True)
class AdvanceEntry:
    """Domain entity: cash handed to an employee ahead of payroll."""

    entry_id: AdvanceId
    employee_id: str
    amount: float
    advance_date: date
    reason: str
    created_at: int
    created_by: Optional[str] = None


@dataclass(frozen=True)
class AdvanceView:
    entry: AdvanceEntry
    employee_name: str
