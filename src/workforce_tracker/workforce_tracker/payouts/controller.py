from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_user, error_response, json_body, ok, roles_required
from ..container import Container
from ..payroll.window import ReportingWindow
from ..users.permissions import FINANCIAL_ROLES
from .service import PayoutView


def payout_json(v: PayoutView) -> dict:
    p = v.payout
    return {
        "id": p.payout_id,
        "employee_id": p.employee_id,
        "employee_name": v.employee_name,
        "amount": p.amount,
        "date": p.paid_on.isoformat(),
        "month": p.month,
        "mode": p.mode.value,
        "reference": p.reference,
        "created_at": p.created_at,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_table")
    @roles_required(FINANCIAL_ROLES)
    def payroll_table():
        try:
            window = ReportingWindow.parse(request.args.get("month"))
            rows = container.payroll_report_service.payroll_report(current_role=current_user().role, window=window)
        except Exception as e:
            return error_response(e)
        return ok(rows, window=window.label)

    @app.route("/api/payouts", methods=["GET"], endpoint="list_payouts")
    @roles_required(FINANCIAL_ROLES)
    def list_payouts():
        try:
            rows = container.payout_service.list_payouts(
                current_role=current_user().role, month=request.args.get("month") or None
            )
        except Exception as e:
            return error_response(e)
        return ok([payout_json(v) for v in rows])

    @app.route("/api/payouts", methods=["POST"], endpoint="disburse")
    @admin_required
    def disburse():
        data = json_body()
        try:
            payout = container.payout_service.disburse(
                current_user=current_user(),
                employee_id=data.get("employee_id", ""),
                month=data.get("month", ""),
                mode=data.get("mode"),
                reference=data.get("reference"),
                amount=data.get("amount"),
            )
        except Exception as e:
            return error_response(e)
        return ok(payout, 201)

    @app.route("/api/payouts/<payout_id>", methods=["DELETE"], endpoint="delete_payout")
    @admin_required
    def delete_payout(payout_id: str):
        try:
            container.payout_service.delete_payout(current_user=current_user(), payout_id=payout_id)
        except Exception as e:
            return error_response(e)
        return ok(message="Payout deleted")
