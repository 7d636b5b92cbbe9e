from __future__ import annotations

from datetime import date

import pytest

from src.workforce_tracker.workforce_tracker.core.enums import PaymentMode, Role, Settlement
from src.workforce_tracker.workforce_tracker.core.exceptions import AuthorizationError, ValidationError
from src.workforce_tracker.workforce_tracker.payroll.window import ReportingWindow

MAY = ReportingWindow.for_month("2024-05")


@pytest.fixture
def worker(container, admin, hire, site, today):
    """30000/month, ten full days in May 2024 and a 5000 advance: 5000 net."""
    w = hire(salary=30000)
    for d in range(1, 11):
        container.attendance_service.log_attendance(
            current_user=admin, employee_id=w.employee_id, project_id=site.project_id, work_date=date(2024, 5, d), today=today
        )
    container.advance_service.record_advance(current_user=admin, employee_id=w.employee_id, amount=5000, today=today)
    return w


def test_full_disbursement_settles_the_month(container, admin, worker, today):
    payout = container.payout_service.disburse(
        current_user=admin, employee_id=worker.employee_id, month="2024-05", mode="cash", reference="R-1", today=today
    )

    assert payout.amount == 5000
    assert payout.paid_on == today
    assert payout.mode == PaymentMode.CASH
    assert payout.reference == "R-1"

    row = container.payroll_report_service.employee_summary(worker, MAY)
    assert row.already_paid == 5000
    assert row.net_payable == 0
    assert row.settlement == Settlement.SETTLED

    with pytest.raises(ValidationError):
        container.payout_service.disburse(current_user=admin, employee_id=worker.employee_id, month="2024-05", today=today)


def test_partial_disbursement(container, admin, worker, today):
    container.payout_service.disburse(
        current_user=admin, employee_id=worker.employee_id, month="2024-05", amount=3000, today=today
    )
    assert container.payroll_report_service.employee_summary(worker, MAY).net_payable == 2000

    with pytest.raises(ValidationError):
        container.payout_service.disburse(
            current_user=admin, employee_id=worker.employee_id, month="2024-05", amount=2500, today=today
        )
    with pytest.raises(ValidationError):
        container.payout_service.disburse(
            current_user=admin, employee_id=worker.employee_id, month="2024-05", amount=-1, today=today
        )


def test_disbursement_rules(container, admin, worker, hire, session_of, today):
    mgr = session_of(hire(name="Meg", access=Role.MANAGER, login_id="meg", password="secret2"))

    with pytest.raises(AuthorizationError):
        container.payout_service.disburse(current_user=mgr, employee_id=worker.employee_id, month="2024-05", today=today)
    with pytest.raises(ValidationError):
        container.payout_service.disburse(current_user=admin, employee_id=worker.employee_id, month="May", today=today)
    with pytest.raises(ValidationError):
        container.payout_service.disburse(current_user=admin, employee_id=worker.employee_id, month="2024-05", mode="crypto", today=today)
    with pytest.raises(ValidationError):
        container.payout_service.disburse(current_user=admin, employee_id="ghost", month="2024-05", today=today)
    # Nothing earned in April.
    with pytest.raises(ValidationError):
        container.payout_service.disburse(current_user=admin, employee_id=worker.employee_id, month="2024-04", today=today)


def test_listing_and_deleting_payouts(container, admin, worker, hire, session_of, today):
    sup = session_of(hire(name="Sam", access=Role.SUPERVISOR, login_id="sam", password="secret1"))
    payout = container.payout_service.disburse(
        current_user=admin, employee_id=worker.employee_id, month="2024-05", amount=1000, today=today
    )

    (view,) = container.payout_service.list_payouts(current_role=Role.MANAGER, month="2024-05")
    assert view.employee_name == "Alice Smith"
    assert container.payout_service.list_payouts(current_role=Role.ADMIN, month="2024-04") == []
    with pytest.raises(AuthorizationError):
        container.payout_service.list_payouts(current_role=sup.role)

    container.payout_service.delete_payout(current_user=admin, payout_id=payout.payout_id)
    assert container.payroll_report_service.employee_summary(worker, MAY).net_payable == 5000
