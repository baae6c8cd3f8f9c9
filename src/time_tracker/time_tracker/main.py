from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .mail.sender import Mailer
from .pdf.renderer import PdfRenderer
from .reports.controller import register as register_reports
from .reports.renderer import TEMPLATES_DIR
from .tracker.controller import register as register_tracker

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "HR_EMAIL",
    "MAIL_CONFIG",
    "COMPANY_NAME",
    "PDF_ENABLED",
    "REPORT_ENDPOINT_URL",
    "REPORT_TIMEOUT_SECONDS",
)


def load_settings(settings_module: str, override: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}
    settings.update(override or {})
    return settings


def create_app(
    settings_override: Optional[Mapping[str, Any]] = None,
    *,
    mailer: Optional[Mailer] = None,
    pdf_renderer: Optional[PdfRenderer] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(TEMPLATES_DIR))

    settings_module = get_settings_module()
    settings = load_settings(settings_module, settings_override)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if app.config["DEBUG"]:
        app.logger.info(
            "[time-tracker] settings=%s hr=%s pdf=%s",
            settings_module,
            settings.get("HR_EMAIL"),
            settings.get("PDF_ENABLED"),
        )

    container = build_container(settings=settings, mailer=mailer, pdf_renderer=pdf_renderer)
    app.extensions["time_tracker"] = container

    register_tracker(app, container)
    register_reports(app, container)

    return app
