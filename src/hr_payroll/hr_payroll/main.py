from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .payroll.controller import register as register_payroll

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    apply_cra = bool(getattr(settings, "APPLY_CONSOLIDATED_RELIEF", False))
    app.config["APPLY_CONSOLIDATED_RELIEF"] = apply_cra

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.info(
        "settings=%s db=%s@%s:%s/%s consolidated_relief=%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        apply_cra,
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(db_config=db_config, apply_consolidated_relief=apply_cra)
    register_payroll(app, container)

    return app
