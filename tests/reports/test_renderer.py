from datetime import datetime

from time_tracker.entries.model import TimeEntry
from time_tracker.reports.builder import build_report_payload
from time_tracker.reports.renderer import ReportRenderer


def _report(name="Asha", description=None):
    entries = [
        TimeEntry(entry_id="1", name="Billing API", start_time="13:00", end_time="14:30", duration_minutes=90),
        TimeEntry(
            entry_id="2", name="Stand-up", start_time="09:30", end_time="09:45", duration_minutes=15, description=description
        ),
    ]
    return build_report_payload(name, "Friday, October 16, 2026", entries)


def _renderer():
    return ReportRenderer(company_name="Acme Ltd", clock=lambda: datetime(2026, 10, 16, 18, 5, 9))


def test_subject_names_user_and_date():
    assert _renderer().subject(_report()) == "Daily Time Report - Asha (Friday, October 16, 2026)"


def test_html_lists_projects_in_order_with_badges():
    html = _renderer().render_html(_report(description="Daily sync"))

    assert html.index("1. Stand-up") < html.index("2. Billing API")
    assert "9:30 AM - 9:45 AM" in html
    assert "1:00 PM - 2:30 PM" in html
    assert "1h 30m" in html
    assert "Daily sync" in html
    assert "Acme Ltd" in html
    assert "10/16/2026, 6:05:09 PM" in html


def test_html_escapes_user_text():
    html = _renderer().render_html(_report(name="<b>Eve</b>"))

    assert "<b>Eve</b>" not in html
    assert "&lt;b&gt;Eve&lt;/b&gt;" in html


def test_text_body_summary():
    text = _renderer().render_text(_report())

    assert "Dear HR Manager," in text
    assert "- Total Tasks: 2" in text
    assert "- Total Time Worked: 1h 45m" in text
    assert "- Average Time per Task: 0h 53m" in text
    assert "1. Stand-up (9:30 AM - 9:45 AM, Duration: 0h 15m)" in text
    assert "2. Billing API (1:00 PM - 2:30 PM, Duration: 1h 30m)" in text
