"""Payroll engine: read-only projections over in-memory record lists.

Nothing here touches storage or caches results; callers pass the full
collections and a reporting window and get fresh summaries back.
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..advances.model import AdvanceEntry
from ..attendance.model import AttendanceEntry
from ..common.lookup import index_by
from ..core.enums import Settlement
from ..employees.model import Employee
from ..payouts.model import PayoutEntry
from ..policy.validators import advance_cap
from ..projects.model import Project
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .window import ReportingWindow


@dataclass(frozen=True)
class EmployeePayroll:
    employee_id: str
    name: str
    title: str
    monthly_salary: float
    daily_rate: float
    hourly_rate: float
    total_days: int
    total_regular_hours: float
    total_ot: float
    total_advance: float
    total_salary_earned: float
    already_paid: float
    net_payable: int
    settlement: Settlement
    advance_cap: float
    cap_remaining: Optional[float]


@dataclass(frozen=True)
class ProjectPayroll:
    project_id: str
    name: str
    location: str
    total_hours: float
    labor_cost: float


@dataclass(frozen=True)
class CompanyPayroll:
    window: str
    employee_count: int
    total_regular_hours: float
    total_ot_hours: float
    total_advance: float
    total_salary_earned: float
    net_estimate: int
    total_net_payable: int
    total_paid: float


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_net_payable(earned: float, advances: float, already_paid: float) -> int:
    """Liabilities never go negative: there is no carry-forward debt."""
    return max(0, round_half_up(earned - advances - already_paid))


def _settlement(net_payable: int, earned: float, already_paid: float) -> Settlement:
    if net_payable > 0:
        return Settlement.PENDING
    if earned > 0 or already_paid > 0:
        return Settlement.SETTLED
    return Settlement.IDLE


def _by_employee(items, window: ReportingWindow, date_of) -> Dict[str, list]:
    grouped: Dict[str, list] = defaultdict(list)
    for item in items:
        if window.contains(date_of(item)):
            grouped[item.employee_id].append(item)
    return grouped


def _paid_by_employee(payouts: Sequence[PayoutEntry], window: ReportingWindow) -> Dict[str, float]:
    # Reconciliation is month-scoped: an all-time window has nothing to reconcile.
    paid: Dict[str, float] = defaultdict(float)
    if window.is_all_time:
        return paid
    for p in payouts:
        if p.month == window.month:
            paid[p.employee_id] += p.amount
    return paid


def _summarize(
    employee: Employee,
    attendance: Sequence[AttendanceEntry],
    advances: Sequence[AdvanceEntry],
    already_paid: float,
    window: ReportingWindow,
    calculator: PayrollCalculator,
) -> EmployeePayroll:
    earned = sum(calculator.earned(a, employee) for a in attendance)
    total_advance = sum(a.amount for a in advances)
    net = compute_net_payable(earned, total_advance, already_paid)
    cap = advance_cap(employee)

    return EmployeePayroll(
        employee_id=employee.employee_id,
        name=employee.name,
        title=employee.title,
        monthly_salary=employee.monthly_salary,
        daily_rate=calculator.daily_rate(employee),
        hourly_rate=calculator.hourly_rate(employee),
        total_days=len({a.work_date for a in attendance}),
        total_regular_hours=sum(a.regular_hours for a in attendance),
        total_ot=sum(a.overtime_hours for a in attendance),
        total_advance=total_advance,
        total_salary_earned=earned,
        already_paid=already_paid,
        net_payable=net,
        settlement=_settlement(net, earned, already_paid),
        advance_cap=cap,
        cap_remaining=None if window.is_all_time else max(0.0, cap - total_advance),
    )


def summarize_employees(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceEntry],
    advances: Sequence[AdvanceEntry],
    payouts: Sequence[PayoutEntry],
    window: ReportingWindow,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> List[EmployeePayroll]:
    """One summary per roster employee, in roster order."""
    calc = calculator or StandardPayrollCalculator()
    att = _by_employee(attendance, window, lambda a: a.work_date)
    adv = _by_employee(advances, window, lambda a: a.advance_date)
    paid = _paid_by_employee(payouts, window)

    return [
        _summarize(e, att.get(e.employee_id, []), adv.get(e.employee_id, []), paid.get(e.employee_id, 0.0), window, calc)
        for e in employees
    ]


def summarize_employee(
    employee: Employee,
    attendance: Sequence[AttendanceEntry],
    advances: Sequence[AdvanceEntry],
    payouts: Sequence[PayoutEntry],
    window: ReportingWindow,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> EmployeePayroll:
    return summarize_employees([employee], attendance, advances, payouts, window, calculator=calculator)[0]


def summarize_projects(
    projects: Sequence[Project],
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceEntry],
    window: ReportingWindow,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> List[ProjectPayroll]:
    calc = calculator or StandardPayrollCalculator()
    employees_by_id = index_by(employees, lambda e: e.employee_id)

    hours: Dict[str, float] = defaultdict(float)
    cost: Dict[str, float] = defaultdict(float)
    for a in attendance:
        if not window.contains(a.work_date):
            continue
        hours[a.project_id] += a.regular_hours + a.overtime_hours
        employee = employees_by_id.get(a.employee_id)
        if employee is not None:
            cost[a.project_id] += calc.earned(a, employee)

    return [
        ProjectPayroll(
            project_id=p.project_id,
            name=p.name,
            location=p.location,
            total_hours=hours.get(p.project_id, 0.0),
            labor_cost=cost.get(p.project_id, 0.0),
        )
        for p in projects
    ]


def summarize_company(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceEntry],
    advances: Sequence[AdvanceEntry],
    payouts: Sequence[PayoutEntry],
    window: ReportingWindow,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> CompanyPayroll:
    rows = summarize_employees(employees, attendance, advances, payouts, window, calculator=calculator)
    window_att = [a for a in attendance if window.contains(a.work_date)]
    window_adv = [a for a in advances if window.contains(a.advance_date)]

    total_earned = sum(r.total_salary_earned for r in rows)
    total_advance = sum(a.amount for a in window_adv)

    return CompanyPayroll(
        window=window.label,
        employee_count=len(rows),
        total_regular_hours=sum(a.regular_hours for a in window_att),
        total_ot_hours=sum(a.overtime_hours for a in window_att),
        total_advance=total_advance,
        total_salary_earned=total_earned,
        net_estimate=round_half_up(total_earned - total_advance),
        total_net_payable=sum(r.net_payable for r in rows),
        total_paid=0.0 if window.is_all_time else sum(p.amount for p in payouts if p.month == window.month),
    )
