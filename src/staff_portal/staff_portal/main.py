from __future__ import annotations

import importlib
import logging
import uuid
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .entities.registry import ENTITY_PAGES
from .records.controller import register as register_records
from .session.controller import register as register_session


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    # New id per process: stored credentials are verified again after a restart.
    app.config["BOOT_ID"] = uuid.uuid4().hex

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    api_config = dict(getattr(settings, "API_CONFIG"))
    app.logger.info("settings=%s api=%s", settings_module, api_config.get("base_url"))

    if container is None:
        container = build_container(
            api_config=api_config,
            cache_stale_seconds=float(getattr(settings, "CACHE_STALE_SECONDS", 0)),
        )
    app.extensions["staff_portal"] = container

    register_session(app, container)
    register_dashboard(app, container)
    register_records(app, container, ENTITY_PAGES)
    register_admin(app, container)

    return app
