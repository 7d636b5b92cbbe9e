from __future__ import annotations

import logging

from flask import Flask, session

from ..common.web import admin_required, current_user, error_response, fail, json_body, ok
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user = container.auth_service.authenticate(data.get("login_id", ""), data.get("password", ""))
        except Exception as e:
            return error_response(e)

        session.clear()
        session["user_id"] = user.user_id
        session["name"] = user.name
        session["role"] = user.role.value
        return ok(user)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Logged out")

    @app.route("/api/me", methods=["GET"], endpoint="me")
    def me():
        user = current_user()
        if user is None:
            return fail("Please log in to continue", 401)
        return ok(user)

    @app.route("/api/admin/password", methods=["POST"], endpoint="change_admin_password")
    @admin_required
    def change_admin_password():
        data = json_body()
        try:
            container.admin_account_service.change_password(
                current_role=current_user().role,
                current_password=data.get("current_password", ""),
                new_password=data.get("new_password", ""),
                confirm_password=data.get("confirm_password", ""),
            )
        except Exception as e:
            return error_response(e)
        return ok(message="Password updated")
