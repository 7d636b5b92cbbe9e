from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .advances.controller import register as register_advances
from .attendance.controller import register as register_attendance
from .audit.client import AuditClient
from .audit.controller import register as register_audit
from .container import build_container
from .core.constants import DEFAULT_ADMIN_PASSWORD
from .database.bootstrap import apply_schema, list_tables
from .database.kv_store import KeyValueStore, StorageConfig, open_store
from .employees.controller import register as register_employees
from .payouts.controller import register as register_payouts
from .payroll.controller import register as register_payroll
from .projects.controller import register as register_projects
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app(*, store: Optional[KeyValueStore] = None, audit_client: Optional[AuditClient] = None) -> Flask:
    """App factory.

    `store` and `audit_client` override what the settings module would build;
    tests use them to run against memory and a fake auditor.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=logging.DEBUG if app.config["DEBUG"] else logging.INFO, format=LOG_FORMAT)

    storage = StorageConfig(
        backend=str(getattr(settings, "STORAGE_BACKEND", "file")),
        data_dir=str(getattr(settings, "DATA_DIR", "instance/data")),
        db_config=dict(getattr(settings, "DB_CONFIG", {})),
    )
    logger.info("settings=%s storage=%s", settings_module, storage.backend)

    if store is None:
        if storage.backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(storage.db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(storage.db_config)))
        store = open_store(storage)

    container = build_container(
        store=store,
        default_admin_password=str(getattr(settings, "DEFAULT_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)),
        seed_default_roster=bool(getattr(settings, "SEED_DEFAULT_ROSTER", True)),
        audit_client=audit_client,
        gemini_api_key=getattr(settings, "GEMINI_API_KEY", None),
        gemini_model=str(getattr(settings, "GEMINI_MODEL", "gemini-2.0-flash")),
        audit_timeout=getattr(settings, "AUDIT_TIMEOUT", None),
    )
    app.extensions["workforce_container"] = container

    register_users(app, container)
    register_employees(app, container)
    register_projects(app, container)
    register_attendance(app, container)
    register_advances(app, container)
    register_payroll(app, container)
    register_payouts(app, container)
    register_audit(app, container)

    return app
