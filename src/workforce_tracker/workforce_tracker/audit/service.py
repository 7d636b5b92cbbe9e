from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import asdict
from typing import Dict, List, Optional, Tuple

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.lookup import index_by, resolve_label
from ..core.enums import Role
from ..core.exceptions import AuditUnavailableError
from ..employees.repository import EmployeeRepository
from ..projects.repository import ProjectRepository
from ..users.permissions import require_admin
from .client import AuditClient
from .model import AuditReport, RepeatedEntryGroup

logger = logging.getLogger(__name__)

AUDIT_FAILED = "Audit failed. Ensure the audit API key is configured correctly."

# Never ship credentials or photos to the auditor.
_PRIVATE_EMPLOYEE_FIELDS = ("login_id", "password", "photo")


class AuditService:
    def __init__(
        self,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        *,
        client: Optional[AuditClient] = None,
    ):
        self._employees = employees
        self._projects = projects
        self._attendance = attendance
        self._advances = advances
        self._client = client

    def _payload(self) -> dict:
        employees = []
        for e in self._employees.list_all():
            row = asdict(e)
            for key in _PRIVATE_EMPLOYEE_FIELDS:
                row.pop(key, None)
            employees.append(row)
        return {
            "employees": employees,
            "projects": [asdict(p) for p in self._projects.list_all()],
            "attendance": [asdict(a) for a in self._attendance.list_all()],
            "advances": [asdict(a) for a in self._advances.list_all()],
        }

    def run_audit(self, *, current_role: Role) -> AuditReport:
        """Ask the external auditor to review every log.

        Any failure (missing key, network, malformed answer) becomes one
        generic AuditUnavailableError; partial results are never returned.
        """
        require_admin(current_role, "Only the administrator can run an audit")

        if self._client is None:
            logger.warning("Audit requested but no audit client is configured")
            raise AuditUnavailableError(AUDIT_FAILED)

        try:
            raw = self._client.audit(self._payload())
            report = AuditReport.from_payload(raw)
        except Exception:
            logger.exception("Audit call failed")
            raise AuditUnavailableError(AUDIT_FAILED)

        logger.info("Audit completed with %d findings", len(report.findings))
        return report

    def repeated_entries(self, *, current_role: Role) -> List[RepeatedEntryGroup]:
        require_admin(current_role)

        groups: Dict[Tuple[str, str, str], List[str]] = defaultdict(list)
        for a in self._attendance.list_all():
            groups[(a.employee_id, a.work_date.isoformat(), a.project_id)].append(a.entry_id)

        employees = index_by(self._employees.list_all(), lambda e: e.employee_id)
        return [
            RepeatedEntryGroup(
                employee_id=employee_id,
                employee_name=resolve_label(employees, employee_id, lambda e: e.name),
                work_date=work_date,
                project_id=project_id,
                entry_ids=ids,
            )
            for (employee_id, work_date, project_id), ids in groups.items()
            if len(ids) > 1
        ]
