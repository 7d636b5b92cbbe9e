from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..advances.model import AdvanceEntry, AdvanceId
from ..advances.repository import AdvanceRepository
from ..common.datetime_utils import now_millis, parse_date_field
from ..common.ids import new_id
from ..common.validators import optional_text, require_min_length, require_non_empty, require_non_negative
from ..core.constants import ADMIN_LOGIN_ID, INITIAL_ADVANCE_REASON, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.model import SessionUser
from ..users.permissions import require_admin
from .model import Employee, EmployeeId
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def parse_access(value) -> Role:
    if isinstance(value, Role):
        role = value
    else:
        try:
            role = Role(str(value or Role.STAFF.value).strip().lower())
        except ValueError:
            raise ValidationError("Invalid access level")
    if role == Role.ADMIN:
        raise ValidationError("Admin access is reserved for the administrator account")
    return role


class EmployeeService:
    """Use case: manage the roster (admin)."""

    def __init__(self, employees: EmployeeRepository, advances: AdvanceRepository):
        self._employees = employees
        self._advances = advances

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")
        return employee

    def _credentials(
        self,
        *,
        access: Role,
        login_id: Optional[str],
        password: Optional[str],
        employee_id: Optional[str] = None,
    ) -> tuple[Optional[str], Optional[str]]:
        if access not in (Role.SUPERVISOR, Role.MANAGER):
            return None, None

        login_id = require_non_empty(login_id, "User ID")
        if login_id == ADMIN_LOGIN_ID:
            raise ValidationError("This User ID is reserved")
        owner = self._employees.get_by_login_id(login_id)
        if owner and owner.employee_id != employee_id:
            raise ValidationError("User ID already exists")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        return login_id, password

    def create_employee(
        self,
        *,
        current_user: SessionUser,
        name: str,
        title: str,
        monthly_salary,
        join_date,
        access=Role.STAFF,
        login_id: Optional[str] = None,
        password: Optional[str] = None,
        photo: Optional[str] = None,
        initial_advance=0,
    ) -> Employee:
        require_admin(current_user.role)

        name = require_non_empty(name, "Name")
        salary = require_non_negative(monthly_salary, "Monthly salary")
        joined: date = parse_date_field(join_date, "Join date")
        role = parse_access(access)
        login_id, password = self._credentials(access=role, login_id=login_id, password=password)
        initial = require_non_negative(initial_advance or 0, "Initial advance")

        employee = Employee(
            employee_id=EmployeeId(new_id("emp", {e.employee_id for e in self._employees.list_all()})),
            name=name,
            title=optional_text(title, "Title"),
            monthly_salary=salary,
            join_date=joined,
            access=role,
            login_id=login_id,
            password=password,
            photo=optional_text(photo, "Photo") or None,
            initial_advance=initial,
        )
        self._employees.add(employee)
        logger.info("Employee %s created (%s)", employee.employee_id, role.value)

        # Onboarding advance is booked directly, outside the monthly cap check.
        if initial > 0:
            advance = AdvanceEntry(
                entry_id=AdvanceId(new_id("adv", {a.entry_id for a in self._advances.list_all()})),
                employee_id=employee.employee_id,
                amount=initial,
                advance_date=joined,
                reason=INITIAL_ADVANCE_REASON,
                created_at=now_millis(),
                created_by=current_user.user_id,
            )
            self._advances.add(advance)
            logger.info("Initial advance %s booked for %s", advance.entry_id, employee.employee_id)

        return employee

    def update_employee(
        self,
        *,
        current_user: SessionUser,
        employee_id: str,
        name: str,
        title: str,
        monthly_salary,
        join_date,
        access=Role.STAFF,
        login_id: Optional[str] = None,
        password: Optional[str] = None,
        photo: Optional[str] = None,
    ) -> Employee:
        require_admin(current_user.role)
        existing = self.get_employee(employee_id)

        role = parse_access(access)
        # Blank password on edit keeps the stored one.
        if not password and existing.has_login:
            password = existing.password
        login_id, password = self._credentials(
            access=role, login_id=login_id, password=password, employee_id=existing.employee_id
        )

        updated = Employee(
            employee_id=existing.employee_id,
            name=require_non_empty(name, "Name"),
            title=optional_text(title, "Title"),
            monthly_salary=require_non_negative(monthly_salary, "Monthly salary"),
            join_date=parse_date_field(join_date, "Join date"),
            access=role,
            login_id=login_id,
            password=password,
            photo=existing.photo if photo is None else optional_text(photo, "Photo") or None,
            initial_advance=existing.initial_advance,
        )
        if not self._employees.update(updated):
            raise ValidationError("Updating employee failed")
        logger.info("Employee %s updated", updated.employee_id)
        return updated

    def delete_employee(self, *, current_user: SessionUser, employee_id: str) -> None:
        require_admin(current_user.role)
        if not self._employees.delete_by_id(employee_id):
            raise ValidationError("Employee not found")
        logger.info("Employee %s deleted; existing entries are kept", employee_id)
