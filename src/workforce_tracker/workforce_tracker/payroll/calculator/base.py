from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceEntry
from ...employees.model import Employee


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_rate(self, employee: Employee) -> float:
        raise NotImplementedError

    @abstractmethod
    def hourly_rate(self, employee: Employee) -> float:
        raise NotImplementedError

    @abstractmethod
    def earned(self, entry: AttendanceEntry, employee: Employee) -> float:
        raise NotImplementedError
