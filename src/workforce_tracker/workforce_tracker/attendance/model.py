from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NewType, Optional

from ..core.enums import AttendanceStatus

AttendanceId = NewType("AttendanceId", str)


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one employee's logged hours on one project for one day.

    Immutable once stored; delete and recreate to correct it.
    """

    entry_id: AttendanceId
    employee_id: str
    project_id: str
    work_date: date
    regular_hours: float
    overtime_hours: float
    created_at: int
    created_by: Optional[str] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT


@dataclass(frozen=True)
class AttendanceView:
    """Read-model for listings: references resolved to display names."""

    entry: AttendanceEntry
    employee_name: str
    project_name: str
