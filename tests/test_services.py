from __future__ import annotations

from datetime import date

import pytest

from src.workforce_tracker.workforce_tracker.core.constants import INITIAL_ADVANCE_REASON
from src.workforce_tracker.workforce_tracker.core.enums import Role
from src.workforce_tracker.workforce_tracker.core.exceptions import (
    AdvanceCapExceededError,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)
from src.workforce_tracker.workforce_tracker.users.service import INVALID_CREDENTIALS


# --- login -----------------------------------------------------------------


def test_admin_logs_in_with_default_password(container):
    user = container.auth_service.authenticate("admin", "admin123")
    assert user.role == Role.ADMIN
    assert user.user_id == "admin"


def test_login_failures_share_one_message(container, hire):
    hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1")
    hire(name="Staffer")

    for login_id, password in [("sam", "wrong"), ("nobody", "secret1"), ("admin", "nope"), ("", "")]:
        with pytest.raises(AuthenticationError) as exc:
            container.auth_service.authenticate(login_id, password)
        assert str(exc.value) == INVALID_CREDENTIALS


def test_supervisor_and_manager_log_in(container, hire):
    sup = hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1")
    mgr = hire(name="Meg", access=Role.MANAGER, login_id="meg", password="secret2")

    assert container.auth_service.authenticate("sam", "secret1").user_id == sup.employee_id
    assert container.auth_service.authenticate("meg", "secret2").role == Role.MANAGER
    assert container.auth_service.authenticate("meg", "secret2").user_id == mgr.employee_id


# --- admin password --------------------------------------------------------


def test_change_admin_password(container):
    svc = container.admin_account_service
    with pytest.raises(ValidationError):
        svc.change_password(current_role=Role.ADMIN, current_password="bad", new_password="newpass", confirm_password="newpass")
    with pytest.raises(ValidationError):
        svc.change_password(current_role=Role.ADMIN, current_password="admin123", new_password="newpass", confirm_password="other1")
    with pytest.raises(ValidationError):
        svc.change_password(current_role=Role.ADMIN, current_password="admin123", new_password="abc", confirm_password="abc")

    svc.change_password(current_role=Role.ADMIN, current_password="admin123", new_password="newpass", confirm_password="newpass")

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("admin", "admin123")
    assert container.auth_service.authenticate("admin", "newpass").role == Role.ADMIN


def test_only_admin_changes_password(container):
    with pytest.raises(AuthorizationError):
        container.admin_account_service.change_password(
            current_role=Role.MANAGER, current_password="admin123", new_password="newpass", confirm_password="newpass"
        )


# --- roster ----------------------------------------------------------------


def test_login_roles_need_credentials(hire):
    with pytest.raises(ValidationError):
        hire(name="NoId", access=Role.SUPERVISOR, password="secret1")
    with pytest.raises(ValidationError):
        hire(name="Short", access=Role.SUPERVISOR, login_id="short", password="abc")
    with pytest.raises(ValidationError):
        hire(name="Reserved", access=Role.MANAGER, login_id="admin", password="secret1")

    hire(name="First", access=Role.SUPERVISOR, login_id="dup", password="secret1")
    with pytest.raises(ValidationError):
        hire(name="Second", access=Role.MANAGER, login_id="dup", password="secret2")


def test_staff_credentials_are_dropped(hire):
    worker = hire(login_id="ignored", password="whatever")
    assert worker.login_id is None
    assert worker.password is None


def test_admin_access_cannot_be_granted(hire):
    with pytest.raises(ValidationError):
        hire(access="admin")


def test_initial_advance_booked_on_join_date_outside_cap(container, hire):
    worker = hire(salary=10000, join_date="2024-05-02", initial_advance=8000)

    (advance,) = container.advances_repo.list_all()
    assert advance.employee_id == worker.employee_id
    assert advance.amount == 8000
    assert advance.advance_date == date(2024, 5, 2)
    assert advance.reason == INITIAL_ADVANCE_REASON


def test_update_with_blank_password_keeps_stored_one(container, admin, hire):
    sup = hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1")

    container.employee_service.update_employee(
        current_user=admin,
        employee_id=sup.employee_id,
        name="Sam Porter",
        title="Foreman",
        monthly_salary=40000,
        join_date="2024-01-01",
        access=Role.SUPERVISOR,
        login_id="sam",
        password="",
    )

    assert container.auth_service.authenticate("sam", "secret1").name == "Sam Porter"


def test_roster_changes_are_admin_only(container, hire, session_of):
    mgr = session_of(hire(name="Meg", access=Role.MANAGER, login_id="meg", password="secret2"))
    with pytest.raises(AuthorizationError):
        container.project_service.create_project(current_user=mgr, name="Marina")
    with pytest.raises(AuthorizationError):
        container.employee_service.create_employee(
            current_user=mgr, name="X", title="", monthly_salary=1, join_date="2024-01-01"
        )


def test_deleting_employee_keeps_entries_with_unknown_name(container, admin, hire, site, today):
    worker = hire()
    container.attendance_service.log_attendance(
        current_user=admin, employee_id=worker.employee_id, project_id=site.project_id, today=today
    )
    container.employee_service.delete_employee(current_user=admin, employee_id=worker.employee_id)

    (view,) = container.attendance_service.list_visible(current_user=admin)
    assert view.employee_name == "Unknown"
    assert view.project_name == "Skyline Tower"


# --- entry logging and visibility ------------------------------------------


def test_supervisor_sees_only_own_entries(container, admin, hire, site, session_of, today):
    sup = session_of(hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1"))
    mgr = session_of(hire(name="Meg", access=Role.MANAGER, login_id="meg", password="secret2"))
    a, b, c = hire(name="A"), hire(name="B"), hire(name="C")

    entry_a = container.attendance_service.log_attendance(
        current_user=sup, employee_id=a.employee_id, project_id=site.project_id, today=today
    )
    entry_b = container.attendance_service.log_attendance(
        current_user=sup, employee_id=b.employee_id, project_id=site.project_id, today=today
    )
    container.attendance_service.log_attendance(
        current_user=admin, employee_id=c.employee_id, project_id=site.project_id, today=today
    )

    seen = {v.entry.entry_id for v in container.attendance_service.list_visible(current_user=sup)}
    assert seen == {entry_a.entry_id, entry_b.entry_id}
    assert len(container.attendance_service.list_visible(current_user=mgr)) == 3
    assert len(container.attendance_service.list_visible(current_user=admin)) == 3


def test_supervisor_date_is_pinned_to_today(container, hire, site, session_of, today):
    sup = session_of(hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1"))
    worker = hire()

    with pytest.raises(ValidationError):
        container.attendance_service.log_attendance(
            current_user=sup, employee_id=worker.employee_id, project_id=site.project_id, work_date="2024-05-09", today=today
        )

    entry = container.attendance_service.log_attendance(
        current_user=sup, employee_id=worker.employee_id, project_id=site.project_id, today=today
    )
    assert entry.work_date == today
    assert entry.created_by == sup.user_id


def test_attendance_requires_known_employee_and_project(container, admin, hire, site, today):
    worker = hire()
    with pytest.raises(ValidationError):
        container.attendance_service.log_attendance(current_user=admin, employee_id="nope", project_id=site.project_id, today=today)
    with pytest.raises(ValidationError):
        container.attendance_service.log_attendance(current_user=admin, employee_id=worker.employee_id, project_id="nope", today=today)
    with pytest.raises(ValidationError):
        container.attendance_service.log_attendance(
            current_user=admin, employee_id=worker.employee_id, project_id=site.project_id, regular_hours=-1, today=today
        )


def test_only_admin_deletes_entries(container, admin, hire, site, session_of, today):
    mgr = session_of(hire(name="Meg", access=Role.MANAGER, login_id="meg", password="secret2"))
    worker = hire()
    entry = container.attendance_service.log_attendance(
        current_user=mgr, employee_id=worker.employee_id, project_id=site.project_id, today=today
    )
    advance = container.advance_service.record_advance(
        current_user=mgr, employee_id=worker.employee_id, amount=100, today=today
    )

    with pytest.raises(AuthorizationError):
        container.attendance_service.delete_entry(current_user=mgr, entry_id=entry.entry_id)
    with pytest.raises(AuthorizationError):
        container.advance_service.delete_entry(current_user=mgr, entry_id=advance.entry_id)

    container.attendance_service.delete_entry(current_user=admin, entry_id=entry.entry_id)
    container.advance_service.delete_entry(current_user=admin, entry_id=advance.entry_id)
    assert container.attendance_repo.list_all() == []
    assert container.advances_repo.list_all() == []


def test_supervisor_advances_are_scoped(container, admin, hire, session_of, today):
    sup = session_of(hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1"))
    worker = hire()
    mine = container.advance_service.record_advance(current_user=sup, employee_id=worker.employee_id, amount=100, today=today)
    container.advance_service.record_advance(current_user=admin, employee_id=worker.employee_id, amount=200, today=today)

    assert [v.entry.entry_id for v in container.advance_service.list_visible(current_user=sup)] == [mine.entry_id]


def test_same_day_advances_only_limited_by_cap(container, admin, hire, today):
    worker = hire(salary=30000)
    for amount in (5000, 5000, 5000):
        container.advance_service.record_advance(
            current_user=admin, employee_id=worker.employee_id, amount=amount, reason="Rent", today=today
        )

    with pytest.raises(AdvanceCapExceededError):
        container.advance_service.record_advance(current_user=admin, employee_id=worker.employee_id, amount=1, today=today)
    assert len(container.advances_repo.list_all()) == 3


# --- reports ---------------------------------------------------------------


def test_financial_reports_hidden_from_supervisors(container, hire, session_of):
    from src.workforce_tracker.workforce_tracker.payroll.window import ReportingWindow

    sup = session_of(hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1"))
    window = ReportingWindow.for_month("2024-05")

    with pytest.raises(AuthorizationError):
        container.payroll_report_service.payroll_report(current_role=sup.role, window=window)
    assert container.payroll_report_service.build_dashboard(current_role=sup.role, window=window).show_financials is False
    assert container.payroll_report_service.build_dashboard(current_role=Role.MANAGER, window=window).show_financials is True


def test_reports_reflect_latest_mutation(container, admin, hire, site, today):
    from src.workforce_tracker.workforce_tracker.payroll.window import ReportingWindow

    worker = hire(salary=24000)
    window = ReportingWindow.for_month("2024-05")
    assert container.payroll_report_service.employee_summary(worker, window).net_payable == 0

    container.attendance_service.log_attendance(
        current_user=admin, employee_id=worker.employee_id, project_id=site.project_id, overtime_hours=2, today=today
    )
    assert container.payroll_report_service.employee_summary(worker, window).net_payable == 1000
