from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, current_user, error_response, json_body, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    @login_required
    def list_projects():
        return ok(container.project_service.list_projects())

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    @admin_required
    def create_project():
        data = json_body()
        try:
            project = container.project_service.create_project(
                current_user=current_user(), name=data.get("name", ""), location=data.get("location", "")
            )
        except Exception as e:
            return error_response(e)
        return ok(project, 201)

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    @admin_required
    def delete_project(project_id: str):
        try:
            container.project_service.delete_project(current_user=current_user(), project_id=project_id)
        except Exception as e:
            return error_response(e)
        return ok(message="Project deleted")
