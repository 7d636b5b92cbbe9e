"""Write the demo roster into the configured store if none is stored yet."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.workforce_tracker.workforce_tracker.database.kv_store import StorageConfig, open_store
from src.workforce_tracker.workforce_tracker.database.seed import default_employees, default_projects
from src.workforce_tracker.workforce_tracker.employees.json_employee_repository import JsonEmployeeRepository
from src.workforce_tracker.workforce_tracker.projects.json_project_repository import JsonProjectRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = StorageConfig(
        backend=str(settings.STORAGE_BACKEND),
        data_dir=str(settings.DATA_DIR),
        db_config=dict(settings.DB_CONFIG),
    )
    if storage.backend == "memory":
        raise SystemExit("Nothing to seed: STORAGE_BACKEND=memory does not persist.")

    store = open_store(storage)
    employees = JsonEmployeeRepository(store, seed=default_employees)
    projects = JsonProjectRepository(store, seed=default_projects)

    print(
        f"OK: {storage.backend} store holds {len(employees.list_all())} employees "
        f"and {len(projects.list_all())} projects"
    )


if __name__ == "__main__":
    main()
