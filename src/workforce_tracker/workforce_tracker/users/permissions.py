from __future__ import annotations

from typing import Iterable, List, Protocol, TypeVar

from ..core.enums import Role
from ..core.exceptions import AuthorizationError

FULL_VISIBILITY = frozenset({Role.ADMIN, Role.MANAGER})
FINANCIAL_ROLES = frozenset({Role.ADMIN, Role.MANAGER})
ENTRY_ROLES = frozenset({Role.ADMIN, Role.MANAGER, Role.SUPERVISOR})


class _Created(Protocol):
    created_by: object


E = TypeVar("E", bound=_Created)


def require_role(current_role: Role, allowed: Iterable[Role], message: str = "You do not have permission") -> None:
    if current_role not in set(allowed):
        raise AuthorizationError(message)


def require_admin(current_role: Role, message: str = "Only the administrator can do this") -> None:
    require_role(current_role, (Role.ADMIN,), message)


def visible_entries(entries: Iterable[E], *, user_id: str, role: Role) -> List[E]:
    """Admins and managers see everything; anyone else only what they created."""
    if role in FULL_VISIBILITY:
        return list(entries)
    return [e for e in entries if e.created_by == user_id]
