from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import now_local, now_millis, parse_month
from ..common.ids import new_id
from ..common.lookup import index_by, resolve_label
from ..common.validators import optional_text, require_non_empty, require_positive
from ..core.enums import PaymentMode, Role
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.service import PayrollReportService
from ..payroll.window import ReportingWindow
from ..users.model import SessionUser
from ..users.permissions import FINANCIAL_ROLES, require_admin, require_role
from .model import PayoutEntry, PayoutId
from .repository import PayoutRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayoutView:
    payout: PayoutEntry
    employee_name: str


def parse_mode(value) -> PaymentMode:
    if isinstance(value, PaymentMode):
        return value
    try:
        return PaymentMode(str(value or PaymentMode.BANK.value).strip().lower())
    except ValueError:
        raise ValidationError("Payment mode must be cash, bank or cheque")


class PayoutService:
    """Use case: settle a month's net payable with one or more payouts."""

    def __init__(self, payouts: PayoutRepository, employees: EmployeeRepository, payroll: PayrollReportService):
        self._payouts = payouts
        self._employees = employees
        self._payroll = payroll

    def disburse(
        self,
        *,
        current_user: SessionUser,
        employee_id: str,
        month: str,
        mode=PaymentMode.BANK,
        reference: Optional[str] = None,
        amount=None,
        today: Optional[date] = None,
    ) -> PayoutEntry:
        require_admin(current_user.role, "Only the administrator can disburse salaries")

        employee_id = require_non_empty(employee_id, "Employee")
        month = parse_month(month)
        payment_mode = parse_mode(mode)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")

        summary = self._payroll.employee_summary(employee, ReportingWindow.for_month(month))
        if summary.net_payable <= 0:
            raise ValidationError(f"Nothing is payable to {employee.name} for {month}")

        value = float(summary.net_payable) if amount in (None, "") else require_positive(amount, "Amount")
        if value > summary.net_payable:
            raise ValidationError(f"Amount exceeds the net payable of {summary.net_payable}")

        today = today or now_local().date()
        payout = PayoutEntry(
            payout_id=PayoutId(new_id("pay", {p.payout_id for p in self._payouts.list_all()})),
            employee_id=employee_id,
            amount=value,
            paid_on=today,
            month=month,
            mode=payment_mode,
            created_at=now_millis(),
            reference=optional_text(reference, "Reference") or None,
        )
        self._payouts.add(payout)
        logger.info("Payout %s of %s to %s for %s via %s", payout.payout_id, value, employee_id, month, payment_mode.value)
        return payout

    def list_payouts(self, *, current_role: Role, month: Optional[str] = None) -> List[PayoutView]:
        require_role(current_role, FINANCIAL_ROLES, "Payouts are restricted to admins and managers")

        rows = list(self._payouts.list_all())
        if month:
            month = parse_month(month)
            rows = [p for p in rows if p.month == month]
        rows.sort(key=lambda p: p.created_at, reverse=True)

        employees = index_by(self._employees.list_all(), lambda e: e.employee_id)
        return [PayoutView(payout=p, employee_name=resolve_label(employees, p.employee_id, lambda e: e.name)) for p in rows]

    def delete_payout(self, *, current_user: SessionUser, payout_id: str) -> None:
        require_admin(current_user.role, "Only the administrator can delete payouts")
        if not self._payouts.delete_by_id(payout_id):
            raise ValidationError("Payout not found")
        logger.info("Payout %s deleted", payout_id)
