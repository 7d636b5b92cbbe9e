from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import now_local, now_millis, parse_date_field
from ..common.ids import new_id
from ..common.lookup import index_by, resolve_label
from ..common.validators import optional_text, require_non_empty, require_positive
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..policy.validators import check_advance_cap
from ..users.model import SessionUser
from ..users.permissions import ENTRY_ROLES, require_admin, require_role, visible_entries
from .model import AdvanceEntry, AdvanceId, AdvanceView
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


class AdvanceService:
    def __init__(self, advances: AdvanceRepository, employees: EmployeeRepository):
        self._advances = advances
        self._employees = employees

    def record_advance(
        self,
        *,
        current_user: SessionUser,
        employee_id: str,
        amount,
        advance_date=None,
        reason: str = "",
        today: Optional[date] = None,
    ) -> AdvanceEntry:
        require_role(current_user.role, ENTRY_ROLES)

        employee_id = require_non_empty(employee_id, "Employee")
        value = require_positive(amount, "Amount")
        today = today or now_local().date()
        day = today if advance_date in (None, "") else parse_date_field(advance_date, "Date")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")

        existing = self._advances.list_all()
        check_advance_cap(existing, employee=employee, advance_date=day, amount=value)

        entry = AdvanceEntry(
            entry_id=AdvanceId(new_id("adv", {a.entry_id for a in existing})),
            employee_id=employee_id,
            amount=value,
            advance_date=day,
            reason=optional_text(reason, "Reason"),
            created_at=now_millis(),
            created_by=current_user.user_id,
        )
        self._advances.add(entry)
        logger.info("Advance %s of %s recorded for %s by %s", entry.entry_id, value, employee_id, current_user.user_id)
        return entry

    def list_visible(self, *, current_user: SessionUser) -> List[AdvanceView]:
        rows = visible_entries(self._advances.list_all(), user_id=current_user.user_id, role=current_user.role)
        rows.sort(key=lambda a: a.created_at, reverse=True)

        employees = index_by(self._employees.list_all(), lambda e: e.employee_id)
        return [AdvanceView(entry=a, employee_name=resolve_label(employees, a.employee_id, lambda e: e.name)) for a in rows]

    def delete_entry(self, *, current_user: SessionUser, entry_id: str) -> None:
        require_admin(current_user.role, "Only the administrator can delete entries")
        if not self._advances.delete_by_id(entry_id):
            raise ValidationError("Advance entry not found")
        logger.info("Advance %s deleted", entry_id)
