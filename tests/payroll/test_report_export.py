from __future__ import annotations

from src.workforce_tracker.workforce_tracker.payroll.export import build_payroll_csv
from src.workforce_tracker.workforce_tracker.payroll.window import ReportingWindow


def test_csv_has_one_row_per_employee(container, admin, hire, site, today):
    a = hire(name="Alice Smith", salary=24000)
    hire(name="Bob, Jr.", title="Glass Cutter", salary=35000)
    container.attendance_service.log_attendance(
        current_user=admin, employee_id=a.employee_id, project_id=site.project_id, overtime_hours=2.5, today=today
    )
    container.advance_service.record_advance(current_user=admin, employee_id=a.employee_id, amount=100, today=today)

    rows = container.payroll_report_service.payroll_report(current_role=admin.role, window=ReportingWindow.for_month("2024-05"))
    lines = build_payroll_csv(rows).splitlines()

    assert lines[0] == "Employee,Role,Days Worked,OT Hours,Advances,Net Payable"
    # 800 + 2.5 * 100 - 100
    assert lines[1] == "Alice Smith,Installer,1,2.5,100,950"
    assert lines[2] == '"Bob, Jr.",Glass Cutter,0,0,0,0'
    assert len(lines) == 3


def test_csv_for_empty_roster_is_header_only():
    assert build_payroll_csv([]) == "Employee,Role,Days Worked,OT Hours,Advances,Net Payable\n"
