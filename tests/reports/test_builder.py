import pytest

from time_tracker.core.enums import ReportFormat
from time_tracker.core.exceptions import ValidationError
from time_tracker.entries.model import TimeEntry
from time_tracker.reports.builder import build_report_payload
from time_tracker.reports.model import ReportRequest

ENTRIES = [
    TimeEntry(entry_id="a", name="Alpha", start_time="10:00", end_time="10:30", duration_minutes=30),
    TimeEntry(entry_id="b", name="Beta", start_time="09:30", end_time="10:00", duration_minutes=30, description="prep"),
]


def test_payload_sorted_with_stats():
    report = build_report_payload("Asha", "Friday, October 16, 2026", ENTRIES)

    payload = report.to_payload()

    assert [p["name"] for p in payload["projects"]] == ["Beta", "Alpha"]
    assert payload["stats"] == {
        "totalProjects": 2,
        "totalTime": "1h 0m",
        "averageTime": "0h 30m",
        "totalTimeMinutes": 60,
    }
    assert payload["userName"] == "Asha"
    assert payload["date"] == "Friday, October 16, 2026"
    assert payload["projects"][0] == {
        "id": "b",
        "name": "Beta",
        "description": "prep",
        "startTime": "09:30",
        "endTime": "10:00",
        "duration": 30,
    }


def test_blank_recipient_is_omitted():
    report = build_report_payload("Asha", "today", ENTRIES, recipient_email="   ")

    assert report.additional_email is None
    assert "additionalEmail" not in report.to_payload()
    assert "format" not in report.to_payload()


def test_recipient_is_trimmed_and_format_parsed():
    report = build_report_payload("Asha", "today", ENTRIES, recipient_email=" me@company.com ", report_format="PDF")

    assert report.additional_email == "me@company.com"
    assert report.report_format is ReportFormat.PDF
    assert report.to_payload()["format"] == "pdf"


def test_invalid_inputs_fail_before_sending():
    with pytest.raises(ValidationError, match="enter your name"):
        build_report_payload("  ", "today", ENTRIES)
    with pytest.raises(ValidationError, match="at least 2 characters"):
        build_report_payload(" A ", "today", ENTRIES)
    with pytest.raises(ValidationError, match="at least one project"):
        build_report_payload("Asha", "today", [])
    with pytest.raises(ValidationError, match="valid email"):
        build_report_payload("Asha", "today", ENTRIES, recipient_email="asha@")
    with pytest.raises(ValidationError, match="Unsupported report format"):
        build_report_payload("Asha", "today", ENTRIES, report_format="docx")


def test_server_parses_what_the_client_builds():
    sent = build_report_payload("Asha", "today", ENTRIES, recipient_email="me@company.com", report_format="html")

    received = ReportRequest.from_payload(sent.to_payload())

    assert received == sent


def test_server_recomputes_durations_and_stats():
    payload = {
        "userName": "Asha",
        "date": "today",
        "projects": [{"name": "Alpha", "startTime": "9:00", "endTime": "10:00", "duration": 999}],
        "stats": {"totalProjects": 42},
    }

    report = ReportRequest.from_payload(payload)

    assert report.entries[0].duration_minutes == 60
    assert report.entries[0].start_time == "09:00"
    assert report.stats.total_entries == 1


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"date": "today", "projects": [{"name": "Alpha", "startTime": "09:00", "endTime": "10:00"}]},
        {"userName": "Asha", "date": "today", "projects": []},
        {"userName": "Asha", "date": "today", "projects": [{"name": "Alpha", "startTime": "10:00", "endTime": "09:00"}]},
        {"userName": "A", "date": "today", "projects": [{"name": "Alpha", "startTime": "09:00", "endTime": "10:00"}]},
        {"userName": "Asha", "date": "today", "projects": [{"name": "X", "startTime": "09:00", "endTime": "10:00"}]},
        {"userName": 123, "date": "today", "projects": [{"name": "Alpha", "startTime": "09:00", "endTime": "10:00"}]},
        {"userName": "Asha", "date": "today", "projects": [{"name": "Alpha", "startTime": 900, "endTime": "10:00"}]},
        {"userName": "Asha", "date": "today", "projects": [{"name": "Alpha", "startTime": "09:00", "endTime": "10:00", "description": 5}]},
    ],
)
def test_server_rejects_malformed_payloads(payload):
    with pytest.raises(ValidationError):
        ReportRequest.from_payload(payload)
