from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NewType, Optional

from ..core.enums import Role

EmployeeId = NewType("EmployeeId", str)


@dataclass(frozen=True)
class Employee:
    """Domain entity: a worker on the roster.

    `title` is the job title shown on reports; `access` decides whether the
    employee may log in (supervisor/manager) and what they can see.
    """

    employee_id: EmployeeId
    name: str
    title: str
    monthly_salary: float
    join_date: date
    access: Role = Role.STAFF
    login_id: Optional[str] = None
    password: Optional[str] = None
    photo: Optional[str] = None
    initial_advance: float = 0.0

    def __post_init__(self):
        if self.access == Role.ADMIN:
            raise ValueError("Employees cannot hold the admin role")

    @property
    def has_login(self) -> bool:
        return self.access.can_login
