"""Example: use the service layer without Flask.

Builds a small day of entries, prints the stats and writes the rendered
report HTML next to this file. No email is sent.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src" / "time_tracker"))

from time_tracker.common.datetime_utils import format_date_label, now_local
from time_tracker.entries.model import TrackerState
from time_tracker.entries.service import TrackerService
from time_tracker.reports.builder import build_report_payload
from time_tracker.reports.renderer import ReportRenderer


def main():
    tracker = TrackerService()
    state = TrackerState(user_name="Demo User", selected_date=now_local().date().isoformat())
    state = tracker.add_entry(state, name="Code review", start_time="10:00", end_time="10:30")
    state = tracker.add_entry(state, name="Stand-up", start_time="09:30", end_time="10:00", description="Team sync")

    report = build_report_payload(state.user_name, format_date_label(now_local().date()), state.entries)
    print(report.stats.to_payload())

    out = Path(__file__).with_name("example_report.html")
    out.write_text(ReportRenderer().render_html(report), encoding="utf-8")
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
