"""Pre-mutation rule checks.

Both checks are pure: they read the entries they are given, raise on
violation and never touch storage. Callers pass the full, current entry set on
every submission.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..advances.model import AdvanceEntry
from ..attendance.model import AttendanceEntry
from ..common.datetime_utils import month_of
from ..core.constants import ADVANCE_CAP_RATIO
from ..core.exceptions import AdvanceCapExceededError, DuplicateAttendanceError
from ..employees.model import Employee


def _fmt_amount(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.2f}"


def check_duplicate_attendance(
    existing: Iterable[AttendanceEntry],
    *,
    employee_id: str,
    work_date: date,
    employee_name: Optional[str] = None,
) -> None:
    """Reject a second entry for the same employee and day, whoever logged it."""
    for entry in existing:
        if entry.employee_id == employee_id and entry.work_date == work_date:
            name = employee_name or "This employee"
            raise DuplicateAttendanceError(f"Attendance already marked for {name} on {work_date.isoformat()}.")


def advance_cap(employee: Employee) -> float:
    return employee.monthly_salary * ADVANCE_CAP_RATIO


def monthly_advance_utilization(existing: Iterable[AdvanceEntry], *, employee_id: str, month: str) -> float:
    return sum(a.amount for a in existing if a.employee_id == employee_id and month_of(a.advance_date) == month)


def check_advance_cap(
    existing: Iterable[AdvanceEntry],
    *,
    employee: Employee,
    advance_date: date,
    amount: float,
) -> None:
    used = monthly_advance_utilization(existing, employee_id=employee.employee_id, month=month_of(advance_date))
    cap = advance_cap(employee)
    if used + amount > cap:
        raise AdvanceCapExceededError(
            f"Advance limit exceeded: monthly cap for {employee.name} is {_fmt_amount(cap)} "
            f"and {_fmt_amount(used)} has already been used this month."
        )
