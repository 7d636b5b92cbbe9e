from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payouts.repository import PayoutRepository
from ..projects.repository import ProjectRepository
from ..users.permissions import FINANCIAL_ROLES, require_role
from . import engine
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .window import ReportingWindow


@dataclass(frozen=True)
class DashboardData:
    window: str
    projects: List[engine.ProjectPayroll]
    employees: List[engine.EmployeePayroll]
    company: engine.CompanyPayroll
    show_financials: bool


class PayrollReportService:
    """Reads every collection fresh and hands it to the payroll engine.

    No result is cached; each call reflects the latest mutation.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        payouts: PayoutRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._projects = projects
        self._attendance = attendance
        self._advances = advances
        self._payouts = payouts
        self._calculator = calculator or StandardPayrollCalculator()

    def employee_summaries(self, window: ReportingWindow) -> List[engine.EmployeePayroll]:
        return engine.summarize_employees(
            self._employees.list_all(),
            self._attendance.list_all(),
            self._advances.list_all(),
            self._payouts.list_all(),
            window,
            calculator=self._calculator,
        )

    def employee_summary(self, employee: Employee, window: ReportingWindow) -> engine.EmployeePayroll:
        return engine.summarize_employee(
            employee,
            self._attendance.list_all(),
            self._advances.list_all(),
            self._payouts.list_all(),
            window,
            calculator=self._calculator,
        )

    def employee_summary_by_id(self, employee_id: str, window: ReportingWindow) -> engine.EmployeePayroll:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")
        return self.employee_summary(employee, window)

    def project_summaries(self, window: ReportingWindow) -> List[engine.ProjectPayroll]:
        return engine.summarize_projects(
            self._projects.list_all(),
            self._employees.list_all(),
            self._attendance.list_all(),
            window,
            calculator=self._calculator,
        )

    def company_summary(self, window: ReportingWindow) -> engine.CompanyPayroll:
        return engine.summarize_company(
            self._employees.list_all(),
            self._attendance.list_all(),
            self._advances.list_all(),
            self._payouts.list_all(),
            window,
            calculator=self._calculator,
        )

    def build_dashboard(self, *, current_role: Role, window: ReportingWindow) -> DashboardData:
        return DashboardData(
            window=window.label,
            projects=self.project_summaries(window),
            employees=self.employee_summaries(window),
            company=self.company_summary(window),
            show_financials=current_role in FINANCIAL_ROLES,
        )

    def payroll_report(self, *, current_role: Role, window: ReportingWindow) -> List[engine.EmployeePayroll]:
        require_role(current_role, FINANCIAL_ROLES, "Financial reports are restricted to admins and managers")
        return self.employee_summaries(window)
