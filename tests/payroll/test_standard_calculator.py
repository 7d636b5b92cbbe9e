from datetime import date

import pytest

from src.workforce_tracker.workforce_tracker.attendance.model import AttendanceEntry
from src.workforce_tracker.workforce_tracker.core.enums import AttendanceStatus
from src.workforce_tracker.workforce_tracker.employees.model import Employee
from src.workforce_tracker.workforce_tracker.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _entry(regular, overtime, status=AttendanceStatus.PRESENT):
    return AttendanceEntry(
        entry_id="att-1",
        employee_id="e1",
        project_id="p1",
        work_date=date(2024, 5, 1),
        regular_hours=regular,
        overtime_hours=overtime,
        created_at=1,
        status=status,
    )


EMPLOYEE = Employee(employee_id="e1", name="A", title="Installer", monthly_salary=24000, join_date=date(2024, 1, 1))


def test_rates_derive_from_monthly_salary():
    calc = StandardPayrollCalculator()
    assert calc.daily_rate(EMPLOYEE) == 800
    assert calc.hourly_rate(EMPLOYEE) == 100


def test_full_day_with_overtime_earns_daily_plus_plain_hourly():
    calc = StandardPayrollCalculator()
    assert calc.earned(_entry(8, 2), EMPLOYEE) == pytest.approx(1000)


def test_partial_day_prorates_daily_rate():
    calc = StandardPayrollCalculator()
    assert calc.earned(_entry(4, 0), EMPLOYEE) == pytest.approx(400)


def test_declared_status_does_not_change_pay():
    calc = StandardPayrollCalculator()
    assert calc.earned(_entry(8, 0, AttendanceStatus.ABSENT), EMPLOYEE) == calc.earned(_entry(8, 0), EMPLOYEE)
