from __future__ import annotations

import logging

from ..common.validators import require_min_length
from ..core.constants import ADMIN_DISPLAY_NAME, ADMIN_LOGIN_ID, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..employees.repository import EmployeeRepository
from .admin_repository import AdminCredentialRepository
from .model import SessionUser
from .permissions import require_admin

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials. Please contact your administrator."


class AuthService:
    """Use case: authenticate user (login).

    Credentials are compared as plain strings. Unknown users and wrong
    passwords produce the same error.
    """

    def __init__(self, employees: EmployeeRepository, admin: AdminCredentialRepository):
        self._employees = employees
        self._admin = admin

    def authenticate(self, login_id: str, password: str) -> SessionUser:
        if not isinstance(login_id, str) or not isinstance(password, str):
            logger.warning("Rejected login with malformed credentials")
            raise AuthenticationError(INVALID_CREDENTIALS)
        login_id = login_id.strip()

        if login_id == ADMIN_LOGIN_ID:
            if password == self._admin.get_password():
                logger.info("Administrator logged in")
                return SessionUser(user_id=ADMIN_LOGIN_ID, name=ADMIN_DISPLAY_NAME, role=Role.ADMIN)
            logger.warning("Rejected login for %r", login_id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        employee = self._employees.get_by_login_id(login_id) if login_id else None
        if not employee or not employee.has_login or employee.password != password:
            logger.warning("Rejected login for %r", login_id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("%s %s logged in", employee.access.value, employee.employee_id)
        return SessionUser(user_id=employee.employee_id, name=employee.name, role=employee.access)


class AdminAccountService:
    """Use case: administrator changes their own password."""

    def __init__(self, admin: AdminCredentialRepository):
        self._admin = admin

    def change_password(self, *, current_role: Role, current_password: str, new_password: str, confirm_password: str) -> None:
        require_admin(current_role)

        if current_password != self._admin.get_password():
            raise ValidationError("Current password is incorrect.")
        if new_password != confirm_password:
            raise ValidationError("New passwords do not match.")
        require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)

        self._admin.set_password(new_password)
        logger.info("Administrator password changed")
