from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Access level of an employee profile or a logged-in session.

    An employee holds exactly one of STAFF/SUPERVISOR/MANAGER; ADMIN belongs to
    the single administrator account.
    """

    STAFF = "staff"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def can_login(self) -> bool:
        return self in (Role.SUPERVISOR, Role.MANAGER, Role.ADMIN)


class AttendanceStatus(str, Enum):
    """Declared day status. Informational only: pay follows logged hours."""

    PRESENT = "present"
    HALF_DAY = "half-day"
    ABSENT = "absent"
    LEAVE = "leave"


class PaymentMode(str, Enum):
    CASH = "cash"
    BANK = "bank"
    CHEQUE = "cheque"


class Settlement(str, Enum):
    """Payout state of an employee for a reporting window."""

    PENDING = "pending"
    SETTLED = "settled"
    IDLE = "idle"


class AuditSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
