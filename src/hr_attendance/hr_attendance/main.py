from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_CHECK_IN_TARGET, DEFAULT_CHECK_OUT_TARGET, DEFAULT_RECAP_GROUP_BY
from .logging_config import setup_logging
from .recap.controller import register as register_recap

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        sheets_config = getattr(settings, "SHEETS_CONFIG")
        container = build_container(
            sheets_config=sheets_config,
            check_in_target=getattr(settings, "CHECK_IN_TARGET", DEFAULT_CHECK_IN_TARGET),
            check_out_target=getattr(settings, "CHECK_OUT_TARGET", DEFAULT_CHECK_OUT_TARGET),
            recap_group_by=getattr(settings, "RECAP_GROUP_BY", DEFAULT_RECAP_GROUP_BY),
        )
        logger.info(
            "settings=%s spreadsheet=%s worksheet=%s",
            settings_module,
            sheets_config.get("spreadsheet_id"),
            sheets_config.get("punch_worksheet"),
        )

    register_attendance(app, container)
    register_recap(app, container)

    return app
