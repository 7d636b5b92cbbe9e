from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import now_local, now_millis, parse_date_field
from ..common.ids import new_id
from ..common.lookup import index_by, resolve_label
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..policy.validators import check_duplicate_attendance
from ..projects.repository import ProjectRepository
from ..users.model import SessionUser
from ..users.permissions import ENTRY_ROLES, require_admin, require_role, visible_entries
from .model import AttendanceEntry, AttendanceId, AttendanceView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

MAX_HOURS_PER_ENTRY = 24


def parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value or AttendanceStatus.PRESENT.value).strip().lower())
    except ValueError:
        raise ValidationError("Invalid attendance status")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        projects: ProjectRepository,
    ):
        self._attendance = attendance
        self._employees = employees
        self._projects = projects

    def log_attendance(
        self,
        *,
        current_user: SessionUser,
        employee_id: str,
        project_id: str,
        work_date=None,
        regular_hours=8,
        overtime_hours=0,
        status=AttendanceStatus.PRESENT,
        today: Optional[date] = None,
    ) -> AttendanceEntry:
        require_role(current_user.role, ENTRY_ROLES)

        employee_id = require_non_empty(employee_id, "Employee")
        project_id = require_non_empty(project_id, "Project")
        today = today or now_local().date()
        day = today if work_date in (None, "") else parse_date_field(work_date, "Date")

        if current_user.role == Role.SUPERVISOR and day != today:
            raise ValidationError("Supervisors can only log attendance for today")

        regular = require_non_negative(regular_hours, "Regular hours")
        overtime = require_non_negative(overtime_hours, "Overtime hours")
        if regular + overtime > MAX_HOURS_PER_ENTRY:
            raise ValidationError(f"Logged hours cannot exceed {MAX_HOURS_PER_ENTRY} per day")
        day_status = parse_status(status)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")
        if not self._projects.get_by_id(project_id):
            raise ValidationError("Project not found")

        existing = self._attendance.list_all()
        check_duplicate_attendance(existing, employee_id=employee_id, work_date=day, employee_name=employee.name)

        entry = AttendanceEntry(
            entry_id=AttendanceId(new_id("att", {a.entry_id for a in existing})),
            employee_id=employee_id,
            project_id=project_id,
            work_date=day,
            regular_hours=regular,
            overtime_hours=overtime,
            created_at=now_millis(),
            created_by=current_user.user_id,
            status=day_status,
        )
        self._attendance.add(entry)
        logger.info("Attendance %s logged for %s on %s by %s", entry.entry_id, employee_id, day, current_user.user_id)
        return entry

    def list_visible(self, *, current_user: SessionUser, limit: Optional[int] = None) -> List[AttendanceView]:
        """Newest first, scoped to what the caller may see."""
        rows = visible_entries(self._attendance.list_all(), user_id=current_user.user_id, role=current_user.role)
        rows.sort(key=lambda a: a.created_at, reverse=True)
        if limit is not None:
            rows = rows[: int(limit)]

        employees = index_by(self._employees.list_all(), lambda e: e.employee_id)
        projects = index_by(self._projects.list_all(), lambda p: p.project_id)
        return [
            AttendanceView(
                entry=a,
                employee_name=resolve_label(employees, a.employee_id, lambda e: e.name),
                project_name=resolve_label(projects, a.project_id, lambda p: p.name),
            )
            for a in rows
        ]

    def delete_entry(self, *, current_user: SessionUser, entry_id: str) -> None:
        require_admin(current_user.role, "Only the administrator can delete entries")
        if not self._attendance.delete_by_id(entry_id):
            raise ValidationError("Attendance entry not found")
        logger.info("Attendance %s deleted", entry_id)
