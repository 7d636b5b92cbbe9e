from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, current_user, error_response, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/audit", methods=["POST"], endpoint="run_audit")
    @admin_required
    def run_audit():
        try:
            report = container.audit_service.run_audit(current_role=current_user().role)
        except Exception as e:
            return error_response(e)
        return ok(report)

    @app.route("/api/admin/repeated-entries", methods=["GET"], endpoint="repeated_entries")
    @admin_required
    def repeated_entries():
        try:
            groups = container.audit_service.repeated_entries(current_role=current_user().role)
        except Exception as e:
            return error_response(e)
        return ok(groups)
