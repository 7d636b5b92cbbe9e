from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .advances.json_advance_repository import JsonAdvanceRepository
from .advances.service import AdvanceService
from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .audit.client import AuditClient, GeminiAuditClient
from .audit.service import AuditService
from .core.constants import DEFAULT_ADMIN_PASSWORD
from .database.kv_store import KeyValueStore
from .database.seed import default_employees, default_projects
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .payouts.json_payout_repository import JsonPayoutRepository
from .payouts.service import PayoutService
from .payroll.service import PayrollReportService
from .projects.json_project_repository import JsonProjectRepository
from .projects.service import ProjectService
from .users.admin_repository import KVAdminCredentialRepository
from .users.service import AdminAccountService, AuthService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    employees_repo: JsonEmployeeRepository
    projects_repo: JsonProjectRepository
    attendance_repo: JsonAttendanceRepository
    advances_repo: JsonAdvanceRepository
    payouts_repo: JsonPayoutRepository
    admin_repo: KVAdminCredentialRepository

    auth_service: AuthService
    admin_account_service: AdminAccountService
    employee_service: EmployeeService
    project_service: ProjectService
    attendance_service: AttendanceService
    advance_service: AdvanceService
    payroll_report_service: PayrollReportService
    payout_service: PayoutService
    audit_service: AuditService


def build_container(
    *,
    store: KeyValueStore,
    default_admin_password: str = DEFAULT_ADMIN_PASSWORD,
    seed_default_roster: bool = True,
    audit_client: Optional[AuditClient] = None,
    gemini_api_key: Optional[str] = None,
    gemini_model: str = "gemini-2.0-flash",
    audit_timeout: Optional[float] = None,
) -> Container:
    employees_repo = JsonEmployeeRepository(store, seed=default_employees if seed_default_roster else None)
    projects_repo = JsonProjectRepository(store, seed=default_projects if seed_default_roster else None)
    attendance_repo = JsonAttendanceRepository(store)
    advances_repo = JsonAdvanceRepository(store)
    payouts_repo = JsonPayoutRepository(store)
    admin_repo = KVAdminCredentialRepository(store, default_password=default_admin_password)

    if audit_client is None and gemini_api_key:
        audit_client = GeminiAuditClient(gemini_api_key, model=gemini_model, timeout=audit_timeout)

    payroll_report_service = PayrollReportService(
        employees_repo, projects_repo, attendance_repo, advances_repo, payouts_repo
    )

    return Container(
        store=store,
        employees_repo=employees_repo,
        projects_repo=projects_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        payouts_repo=payouts_repo,
        admin_repo=admin_repo,
        auth_service=AuthService(employees_repo, admin_repo),
        admin_account_service=AdminAccountService(admin_repo),
        employee_service=EmployeeService(employees_repo, advances_repo),
        project_service=ProjectService(projects_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo, projects_repo),
        advance_service=AdvanceService(advances_repo, employees_repo),
        payroll_report_service=payroll_report_service,
        payout_service=PayoutService(payouts_repo, employees_repo, payroll_report_service),
        audit_service=AuditService(
            employees_repo, projects_repo, attendance_repo, advances_repo, client=audit_client
        ),
    )
