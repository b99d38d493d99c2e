from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container_from_settings
from .employees.controller import register as register_employees
from .hours.controller import register as register_hours
from .payroll.controller import register as register_payroll

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings: ModuleType) -> None:
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)


def create_app(settings: Optional[ModuleType] = None) -> Flask:
    settings = settings or load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_container_from_settings(
        settings,
        load=bool(getattr(settings, "AUTO_LOAD_ATTENDANCE", True)),
    )
    app.extensions["payroll_container"] = container

    logging.getLogger(__name__).debug(
        "settings=%s attendance=%s employees=%s",
        settings.__name__,
        container.attendance_repo.path,
        settings.DATA_CONFIG.get("employee_csv"),
    )

    register_employees(app, container)
    register_hours(app, container)
    register_payroll(app, container)

    return app
