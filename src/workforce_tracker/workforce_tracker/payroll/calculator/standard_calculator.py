from __future__ import annotations

from .base import PayrollCalculator
from ...attendance.model import AttendanceEntry
from ...core.constants import DAYS_PER_MONTH, HOURS_PER_DAY
from ...employees.model import Employee


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: regular hours prorate the daily rate, overtime is paid at
    the plain hourly rate (no premium). Declared status is ignored."""

    def daily_rate(self, employee: Employee) -> float:
        return employee.monthly_salary / DAYS_PER_MONTH

    def hourly_rate(self, employee: Employee) -> float:
        return self.daily_rate(employee) / HOURS_PER_DAY

    def earned(self, entry: AttendanceEntry, employee: Employee) -> float:
        base = (entry.regular_hours / HOURS_PER_DAY) * self.daily_rate(employee)
        ot = entry.overtime_hours * self.hourly_rate(employee)
        return base + ot
