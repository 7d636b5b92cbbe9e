from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_user, error_response, json_body, login_required, ok, roles_required
from ..container import Container
from ..core.enums import Role
from ..payroll.window import ReportingWindow
from ..users.permissions import FINANCIAL_ROLES
from .model import Employee


def employee_json(e: Employee, *, viewer_role: Role) -> dict:
    """Passwords never leave the server; login ids only for the admin."""
    row = {
        "id": e.employee_id,
        "name": e.name,
        "title": e.title,
        "monthly_salary": e.monthly_salary,
        "join_date": e.join_date.isoformat(),
        "access": e.access.value,
        "photo": e.photo,
    }
    if viewer_role == Role.ADMIN:
        row["login_id"] = e.login_id
        row["initial_advance"] = e.initial_advance
    if viewer_role not in FINANCIAL_ROLES:
        row.pop("monthly_salary")
    return row


def _fields(data: dict) -> dict:
    return {
        "name": data.get("name", ""),
        "title": data.get("title", ""),
        "monthly_salary": data.get("monthly_salary"),
        "join_date": data.get("join_date"),
        "access": data.get("access") or Role.STAFF.value,
        "login_id": data.get("login_id"),
        "password": data.get("password"),
        "photo": data.get("photo"),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        role = current_user().role
        rows = container.employee_service.list_employees()
        return ok([employee_json(e, viewer_role=role) for e in rows])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        data = json_body()
        user = current_user()
        try:
            employee = container.employee_service.create_employee(
                current_user=user, initial_advance=data.get("initial_advance") or 0, **_fields(data)
            )
        except Exception as e:
            return error_response(e)
        return ok(employee_json(employee, viewer_role=user.role), 201)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_required
    def update_employee(employee_id: str):
        data = json_body()
        user = current_user()
        try:
            employee = container.employee_service.update_employee(
                current_user=user, employee_id=employee_id, **_fields(data)
            )
        except Exception as e:
            return error_response(e)
        return ok(employee_json(employee, viewer_role=user.role))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        try:
            container.employee_service.delete_employee(current_user=current_user(), employee_id=employee_id)
        except Exception as e:
            return error_response(e)
        return ok(message="Employee deleted")

    @app.route("/api/employees/<employee_id>/summary", methods=["GET"], endpoint="employee_summary")
    @roles_required(FINANCIAL_ROLES)
    def employee_summary(employee_id: str):
        try:
            window = ReportingWindow.parse(request.args.get("month"))
            summary = container.payroll_report_service.employee_summary_by_id(employee_id, window)
        except Exception as e:
            return error_response(e)
        return ok(summary, window=window.label)
