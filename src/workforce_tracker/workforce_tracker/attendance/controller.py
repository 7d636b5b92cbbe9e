from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_user, error_response, json_body, ok, roles_required
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..users.permissions import ENTRY_ROLES
from .model import AttendanceView


def attendance_json(v: AttendanceView) -> dict:
    a = v.entry
    return {
        "id": a.entry_id,
        "employee_id": a.employee_id,
        "employee_name": v.employee_name,
        "project_id": a.project_id,
        "project_name": v.project_name,
        "date": a.work_date.isoformat(),
        "status": a.status.value,
        "regular_hours": a.regular_hours,
        "overtime_hours": a.overtime_hours,
        "created_at": a.created_at,
        "created_by": a.created_by,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @roles_required(ENTRY_ROLES)
    def list_attendance():
        try:
            limit = int(request.args.get("limit", DEFAULT_HISTORY_LIMIT))
        except ValueError:
            limit = DEFAULT_HISTORY_LIMIT
        rows = container.attendance_service.list_visible(current_user=current_user(), limit=max(limit, 0))
        return ok([attendance_json(v) for v in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="log_attendance")
    @roles_required(ENTRY_ROLES)
    def log_attendance():
        data = json_body()
        try:
            entry = container.attendance_service.log_attendance(
                current_user=current_user(),
                employee_id=data.get("employee_id", ""),
                project_id=data.get("project_id", ""),
                work_date=data.get("date"),
                regular_hours=data.get("regular_hours", 8),
                overtime_hours=data.get("overtime_hours", 0),
                status=data.get("status"),
            )
        except Exception as e:
            return error_response(e)
        return ok(entry, 201)

    @app.route("/api/attendance/<entry_id>", methods=["DELETE"], endpoint="delete_attendance")
    @admin_required
    def delete_attendance(entry_id: str):
        try:
            container.attendance_service.delete_entry(current_user=current_user(), entry_id=entry_id)
        except Exception as e:
            return error_response(e)
        return ok(message="Attendance entry deleted")
