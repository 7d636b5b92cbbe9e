from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, error_response, login_required, ok, roles_required, to_jsonable
from ..container import Container
from ..users.permissions import FINANCIAL_ROLES
from .export import build_payroll_csv
from .service import DashboardData
from .window import ReportingWindow


def dashboard_json(d: DashboardData) -> dict:
    if d.show_financials:
        return to_jsonable(d)

    # Hours only; rates, costs and balances stay hidden.
    return {
        "window": d.window,
        "show_financials": False,
        "projects": [
            {"project_id": p.project_id, "name": p.name, "location": p.location, "total_hours": p.total_hours}
            for p in d.projects
        ],
        "employees": [
            {
                "employee_id": e.employee_id,
                "name": e.name,
                "title": e.title,
                "total_days": e.total_days,
                "total_regular_hours": e.total_regular_hours,
                "total_ot": e.total_ot,
            }
            for e in d.employees
        ],
        "company": {
            "window": d.company.window,
            "employee_count": d.company.employee_count,
            "total_regular_hours": d.company.total_regular_hours,
            "total_ot_hours": d.company.total_ot_hours,
        },
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            window = ReportingWindow.parse(request.args.get("month"))
            data = container.payroll_report_service.build_dashboard(current_role=current_user().role, window=window)
        except Exception as e:
            return error_response(e)
        return ok(dashboard_json(data))

    @app.route("/api/reports/payroll.csv", methods=["GET"], endpoint="payroll_csv")
    @roles_required(FINANCIAL_ROLES)
    def payroll_csv():
        try:
            window = ReportingWindow.parse(request.args.get("month"))
            rows = container.payroll_report_service.payroll_report(current_role=current_user().role, window=window)
        except Exception as e:
            return error_response(e)

        filename = f"payroll_{window.label}.csv"
        return app.response_class(
            build_payroll_csv(rows).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
