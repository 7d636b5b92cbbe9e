from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import KEY_EMPLOYEES
from ..core.enums import Role
from ..database.collection import JsonCollection
from ..database.kv_store import KeyValueStore
from .model import Employee, EmployeeId
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _legacy_access(row: dict) -> Role:
    # Older records carry two booleans; manager wins when both are set.
    if row.get("isManager"):
        return Role.MANAGER
    if row.get("isSupervisor"):
        return Role.SUPERVISOR
    return Role.STAFF


def _stored_access(row: dict) -> Role:
    value = row.get("access")
    if not value:
        return _legacy_access(row)
    try:
        access = Role(value)
    except ValueError:
        access = None
    if access is None or access == Role.ADMIN:
        # Employees never hold admin.
        fallback = _legacy_access(row)
        logger.warning("Employee %s has access %r; loading as %s", row.get("id"), value, fallback.value)
        return fallback
    return access


def _from_row(row: dict) -> Employee:
    access = _stored_access(row)
    return Employee(
        employee_id=EmployeeId(str(row["id"])),
        name=str(row.get("name") or ""),
        title=str(row.get("role") or ""),
        monthly_salary=float(row.get("monthlySalary") or 0),
        join_date=parse_iso_date(row["joinDate"]),
        access=access,
        login_id=row.get("userId") or None,
        password=row.get("password") or None,
        photo=row.get("photo") or None,
        initial_advance=float(row.get("initialAdvance") or 0),
    )


def _to_row(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "role": e.title,
        "monthlySalary": e.monthly_salary,
        "joinDate": e.join_date.isoformat(),
        "access": e.access.value,
        "isSupervisor": e.access == Role.SUPERVISOR,
        "isManager": e.access == Role.MANAGER,
        "userId": e.login_id,
        "password": e.password,
        "photo": e.photo,
        "initialAdvance": e.initial_advance,
    }


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, store: KeyValueStore, *, seed: Optional[Callable[[], Iterable[Employee]]] = None):
        self._rows = JsonCollection(
            store,
            KEY_EMPLOYEES,
            to_row=_to_row,
            from_row=_from_row,
            id_of=lambda e: e.employee_id,
            default=seed,
        )

    def list_all(self) -> Sequence[Employee]:
        return self._rows.all()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._rows.get(employee_id)

    def get_by_login_id(self, login_id: str) -> Optional[Employee]:
        for e in self._rows.all():
            if e.login_id is not None and e.login_id == login_id:
                return e
        return None

    def add(self, employee: Employee) -> None:
        self._rows.append(employee)

    def update(self, employee: Employee) -> bool:
        return self._rows.replace(employee)

    def delete_by_id(self, employee_id: str) -> bool:
        return self._rows.remove(employee_id)
