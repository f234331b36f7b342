from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .entries.controller import register as register_entries
from .payroll.controller import register as register_payroll
from .settings.controller import register as register_settings
from .storage.flask_session_storage import FlaskSessionStorage
from .users.controller import register as register_users


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))
    app.logger.setLevel(getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO))

    if container is None:
        data_file = getattr(settings, "DATA_FILE")
        browser_session = FlaskSessionStorage()
        container = build_container(
            data_file=data_file, session_storage=browser_session, remember_storage=browser_session
        )
        app.logger.info("[work-hours] settings=%s data=%s", settings_module, data_file)

    register_users(app, container)
    register_settings(app, container)
    register_entries(app, container)
    register_payroll(app, container)

    return app
