from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..common.datetime_utils import format_duration, format_time_of_day, format_timestamp, now_local
from ..core.constants import DEFAULT_APP_NAME, DEFAULT_COMPANY_NAME
from .model import ReportRequest

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class ReportRenderer:
    """Turns a ReportRequest into the email subject, plain text and HTML."""

    def __init__(
        self,
        *,
        company_name: str = DEFAULT_COMPANY_NAME,
        app_name: str = DEFAULT_APP_NAME,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._company_name = company_name
        self._app_name = app_name
        self._clock = clock or now_local
        self._env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def subject(self, request: ReportRequest) -> str:
        return f"Daily Time Report - {request.user_name} ({request.date})"

    def _context(self, request: ReportRequest) -> dict[str, Any]:
        projects = [
            {
                "index": i,
                "name": e.name,
                "description": e.description,
                "start": format_time_of_day(e.start_time),
                "end": format_time_of_day(e.end_time),
                "duration": format_duration(e.duration_minutes),
            }
            for i, e in enumerate(request.entries, start=1)
        ]
        return {
            "user_name": request.user_name,
            "date": request.date,
            "stats": request.stats.to_payload(),
            "projects": projects,
            "company_name": self._company_name,
            "app_name": self._app_name,
            "generated_on": format_timestamp(self._clock()),
        }

    def render_html(self, request: ReportRequest) -> str:
        return self._env.get_template("report_email.html").render(**self._context(request))

    def render_text(self, request: ReportRequest) -> str:
        return self._env.get_template("report_email.txt").render(**self._context(request))
