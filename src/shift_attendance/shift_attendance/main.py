from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .access.config import AccessConfig
from .approvals.controller import register as register_approvals
from .container import build_container
from .core.constants import DEFAULT_BASE_HOURLY_RATE
from .database.bootstrap import apply_schema, list_tables
from .database.record_store import RecordStore
from .employees.controller import register as register_employees
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)


def create_app(*, store: Optional[RecordStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if store is None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        db_config=db_config,
        access_config=AccessConfig.from_settings(settings),
        base_hourly_rate=float(getattr(settings, "BASE_HOURLY_RATE", DEFAULT_BASE_HOURLY_RATE)),
        enforce_manager_section=bool(getattr(settings, "ENFORCE_MANAGER_SECTION", False)),
        store=store,
    )
    app.extensions["shift_attendance"] = container

    register_employees(app, container)
    register_shifts(app, container)
    register_approvals(app, container)

    return app
