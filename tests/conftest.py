from __future__ import annotations

from datetime import date

import pytest

from src.workforce_tracker.workforce_tracker.container import build_container
from src.workforce_tracker.workforce_tracker.core.enums import Role
from src.workforce_tracker.workforce_tracker.database.kv_store import MemoryKeyValueStore
from src.workforce_tracker.workforce_tracker.users.model import SessionUser


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def container(store):
    # Empty roster; tests add exactly the people they need.
    return build_container(store=store, seed_default_roster=False)


@pytest.fixture
def admin():
    return SessionUser(user_id="admin", name="Administrator", role=Role.ADMIN)


@pytest.fixture
def today():
    return date(2024, 5, 10)


@pytest.fixture
def site(container, admin):
    return container.project_service.create_project(current_user=admin, name="Skyline Tower", location="Downtown")


@pytest.fixture
def hire(container, admin):
    """Create an employee through the roster service and return it."""

    def _hire(name="Alice Smith", salary=30000, access=Role.STAFF, login_id=None, password=None, **kwargs):
        return container.employee_service.create_employee(
            current_user=admin,
            name=name,
            title=kwargs.pop("title", "Installer"),
            monthly_salary=salary,
            join_date=kwargs.pop("join_date", "2024-01-01"),
            access=access,
            login_id=login_id,
            password=password,
            **kwargs,
        )

    return _hire


@pytest.fixture
def session_of():
    """SessionUser for a supervisor or manager employee."""

    def _session_of(employee) -> SessionUser:
        return SessionUser(user_id=employee.employee_id, name=employee.name, role=employee.access)

    return _session_of
