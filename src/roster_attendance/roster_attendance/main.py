from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_iso_date
from .container import STORAGE_MEMORY, STORAGE_MYSQL, Container, build_container
from .core.exceptions import DomainError, NotFound, StatusConflict
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .employees.roster_file import load_roster
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, NotFound):
        return 404
    if isinstance(exc, StatusConflict):
        return 409
    return 400


def register_error_handlers(app: Flask) -> None:
    """Render every domain error as ``{"success": false, "error": <code>}``."""

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = _status_for(exc)
        logger.info("request rejected (%d %s): %s", status, exc.code, exc)
        return jsonify({"success": False, "error": exc.code, "message": str(exc)}), status


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        storage = getattr(settings, "STORAGE_BACKEND", STORAGE_MYSQL)
        db_config = getattr(settings, "DB_CONFIG", None)

        if storage == STORAGE_MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        roster_file = getattr(settings, "ROSTER_FILE", "")
        employees = load_roster(roster_file) if storage == STORAGE_MEMORY and roster_file else ()

        container = build_container(
            storage=storage,
            db_config=db_config,
            employees=employees,
            default_threshold=int(getattr(settings, "DEFAULT_OVERTIME_THRESHOLD", 8)),
            weekend_days=getattr(settings, "WEEKEND_DAYS", ()),
            holidays=[parse_iso_date(d) for d in getattr(settings, "HOLIDAYS", ())],
        )

    logger.debug(
        "settings=%s storage=%s",
        settings_module,
        "mysql" if container.conn is not None else "memory",
    )

    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_reports(app, container)

    return app
