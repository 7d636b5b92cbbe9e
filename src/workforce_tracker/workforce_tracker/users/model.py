from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login.

    `user_id` is the employee id for supervisors/managers and the admin
    sentinel id for the administrator; entries record it as `created_by`.
    """

    user_id: str
    name: str
    role: Role
