"""Example: drive the service layer directly (no Flask).

Runs against an in-memory store seeded with the demo roster.
"""

from datetime import date

from src.workforce_tracker.workforce_tracker.container import build_container
from src.workforce_tracker.workforce_tracker.database.kv_store import MemoryKeyValueStore
from src.workforce_tracker.workforce_tracker.payroll.window import ReportingWindow


def main():
    container = build_container(store=MemoryKeyValueStore())
    admin = container.auth_service.authenticate("admin", "admin123")

    today = date.today()
    container.attendance_service.log_attendance(
        current_user=admin, employee_id="emp2", project_id="proj1", regular_hours=8, overtime_hours=2, today=today
    )
    container.advance_service.record_advance(current_user=admin, employee_id="emp2", amount=2000, today=today)

    window = ReportingWindow.for_month(today.strftime("%Y-%m"))
    for row in container.payroll_report_service.payroll_report(current_role=admin.role, window=window):
        print(f"{row.name:<14} days={row.total_days} ot={row.total_ot} net={row.net_payable}")


if __name__ == "__main__":
    main()
