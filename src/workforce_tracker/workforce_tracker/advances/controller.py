from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, current_user, error_response, json_body, ok, roles_required
from ..container import Container
from ..users.permissions import ENTRY_ROLES
from .model import AdvanceView


def advance_json(v: AdvanceView) -> dict:
    a = v.entry
    return {
        "id": a.entry_id,
        "employee_id": a.employee_id,
        "employee_name": v.employee_name,
        "amount": a.amount,
        "date": a.advance_date.isoformat(),
        "reason": a.reason,
        "created_at": a.created_at,
        "created_by": a.created_by,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/advances", methods=["GET"], endpoint="list_advances")
    @roles_required(ENTRY_ROLES)
    def list_advances():
        rows = container.advance_service.list_visible(current_user=current_user())
        return ok([advance_json(v) for v in rows])

    @app.route("/api/advances", methods=["POST"], endpoint="record_advance")
    @roles_required(ENTRY_ROLES)
    def record_advance():
        data = json_body()
        try:
            entry = container.advance_service.record_advance(
                current_user=current_user(),
                employee_id=data.get("employee_id", ""),
                amount=data.get("amount"),
                advance_date=data.get("date"),
                reason=data.get("reason", ""),
            )
        except Exception as e:
            return error_response(e)
        return ok(entry, 201)

    @app.route("/api/advances/<entry_id>", methods=["DELETE"], endpoint="delete_advance")
    @admin_required
    def delete_advance(entry_id: str):
        try:
            container.advance_service.delete_entry(current_user=current_user(), entry_id=entry_id)
        except Exception as e:
            return error_response(e)
        return ok(message="Advance deleted")
