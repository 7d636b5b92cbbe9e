"""Demo roster written on first start when no roster was ever stored."""

from __future__ import annotations

from datetime import date
from typing import List

from ..core.enums import Role
from ..employees.model import Employee, EmployeeId
from ..projects.model import Project, ProjectId


def default_employees() -> List[Employee]:
    return [
        Employee(EmployeeId("emp1"), "John Doe", "Foreman", 45000.0, date(2023, 1, 1), access=Role.SUPERVISOR),
        Employee(EmployeeId("emp2"), "Alice Smith", "Installer", 30000.0, date(2023, 3, 15)),
        Employee(EmployeeId("emp3"), "Bob Johnson", "Glass Cutter", 35000.0, date(2023, 5, 20)),
        Employee(EmployeeId("emp4"), "Sarah Wilson", "Technician", 28000.0, date(2023, 6, 10)),
    ]


def default_projects() -> List[Project]:
    return [
        Project(ProjectId("proj1"), "Skyline Tower", "Downtown"),
        Project(ProjectId("proj2"), "Marina Bay Hotel", "Coastal Area"),
        Project(ProjectId("proj3"), "Tech Park Plaza", "Suburb"),
    ]
