"""Helpers shared by the JSON controllers.

Session layout after login: `user_id`, `name`, `role` (Role value).
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Iterable, Optional

from flask import current_app, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuditUnavailableError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    ValidationError,
)
from ..users.model import SessionUser

logger = logging.getLogger(__name__)


def to_jsonable(value):
    """Dataclasses, enums and dates down to plain JSON types."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]
    return value


def ok(data=None, status: int = 200, **extra):
    body = {"success": True}
    if data is not None:
        body["data"] = to_jsonable(data)
    body.update(extra)
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (AuditUnavailableError, 502),
)


def error_response(exc: Exception):
    for kind, status in _STATUS_BY_ERROR:
        if isinstance(exc, kind):
            return fail(str(exc), status)
    if isinstance(exc, DomainError):
        return fail(str(exc), 400)

    logger.exception("Unhandled error on %s %s", request.method, request.path)
    if bool(current_app.config.get("DEBUG", False)):
        return fail(f"Internal error: {exc}", 500)
    return fail("Internal error", 500)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def current_user() -> Optional[SessionUser]:
    if "user_id" not in session:
        return None
    try:
        role = Role(session.get("role"))
    except ValueError:
        return None
    return SessionUser(user_id=str(session["user_id"]), name=str(session.get("name") or ""), role=role)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(roles: Iterable[Role]):
    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if user is None:
                return fail("Please log in to continue", 401)
            if user.role not in allowed:
                return fail("You do not have permission", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(view):
    return roles_required((Role.ADMIN,))(view)
