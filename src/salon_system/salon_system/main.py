from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .clients.controller import register as register_clients
from .common.http import respond
from .container import build_container
from .core.exceptions import InfrastructureError
from .core.result import Result
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .items.controller import register as register_items
from .orders.controller import register as register_orders
from .users.controller import register as register_users
from .users.tokens import JwtSettings

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    # Refuse to start with a missing or weak signing key.
    jwt_settings = JwtSettings.from_mapping(vars(settings))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_users(db_config)
        logger.info("demo seed ready")

    container = build_container(db_config=db_config, jwt_settings=jwt_settings)

    register_users(app, container)
    register_clients(app, container)
    register_items(app, container)
    register_orders(app, container)

    @app.errorhandler(InfrastructureError)
    def handle_infrastructure_error(e: InfrastructureError):
        logger.error("Store unavailable: %s", e, exc_info=e)
        return respond(Result.fail("Service unavailable", 500))

    return app
