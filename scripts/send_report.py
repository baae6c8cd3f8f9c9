"""Send a daily report from a JSON file to a running report endpoint.

Example file::

    {
      "userName": "Asha",
      "date": "2026-10-16",
      "email": "asha@company.com",
      "format": "pdf",
      "projects": [
        {"name": "Billing API", "startTime": "09:30", "endTime": "11:00", "description": "Invoices"}
      ]
    }
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "time_tracker"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from time_tracker.common.datetime_utils import format_date_label, now_local, parse_iso_date
from time_tracker.core.exceptions import ValidationError
from time_tracker.entries.model import TrackerState
from time_tracker.entries.service import TrackerService
from time_tracker.reports.builder import build_report_payload
from time_tracker.reports.dispatcher import HttpTransport, ReportDispatcher


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("file", type=Path, help="JSON file with the day's projects")
    parser.add_argument(
        "--url",
        default=getattr(settings, "REPORT_ENDPOINT_URL", "") or "http://127.0.0.1:5000/api/generate-report",
    )
    parser.add_argument("--timeout", type=float, default=getattr(settings, "REPORT_TIMEOUT_SECONDS", 30))
    args = parser.parse_args()

    data = json.loads(args.file.read_text(encoding="utf-8"))

    tracker = TrackerService()
    state = TrackerState(selected_date=data.get("date") or now_local().date().strftime("%Y-%m-%d"))
    try:
        state = tracker.update_profile(
            state,
            user_name=data.get("userName", ""),
            user_email=data.get("email", ""),
            selected_date=state.selected_date,
        )
        for p in data.get("projects", []):
            state = tracker.add_entry(
                state,
                name=p.get("name", ""),
                start_time=p.get("startTime", ""),
                end_time=p.get("endTime", ""),
                description=p.get("description"),
            )
        report = build_report_payload(
            state.user_name,
            format_date_label(parse_iso_date(state.selected_date)),
            state.entries,
            state.user_email,
            data.get("format"),
        )
    except ValidationError as e:
        raise SystemExit(f"Invalid report: {e}")

    result = ReportDispatcher(HttpTransport(args.url, timeout=args.timeout)).send(report)
    if not result.ok:
        raise SystemExit(f"FAILED: {result.message}")
    print(f"OK: {result.message}")


if __name__ == "__main__":
    main()
