import pytest

from time_tracker.core.exceptions import DeliveryError

PAYLOAD = {
    "userName": "Asha",
    "date": "Friday, October 16, 2026",
    "projects": [
        {"name": "Billing", "startTime": "10:00", "endTime": "11:30", "duration": 90},
        {"name": "Stand-up", "startTime": "09:30", "endTime": "09:45", "duration": 15},
    ],
    "stats": {"totalProjects": 2, "totalTime": "1h 45m", "averageTime": "0h 53m", "totalTimeMinutes": 105},
    "additionalEmail": "asha@company.com",
    "format": "pdf",
}


def test_generate_report_success(client, mailer, pdf_renderer):
    resp = client.post("/api/generate-report", json=PAYLOAD)

    assert resp.status_code == 200
    assert resp.get_json() == {
        "success": True,
        "message": "Daily report sent successfully to HR manager and asha@company.com",
    }
    (email,) = mailer.sent
    assert email.recipients == ("hr@example.com", "asha@company.com")
    assert len(pdf_renderer.calls) == 1


def test_short_path_is_an_alias(client, mailer):
    resp = client.post("/generate-report", json={**PAYLOAD, "format": "html"})

    assert resp.status_code == 200
    assert len(mailer.sent) == 1


def test_malformed_body_is_rejected(client, mailer):
    resp = client.post("/api/generate-report", data="not json", content_type="text/plain")

    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert mailer.sent == []


def test_delivery_failure_returns_500(client, mailer):
    mailer.error = DeliveryError("535 authentication failed")

    resp = client.post("/api/generate-report", json=PAYLOAD)

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to send report: 535 authentication failed"}


def _with_project(**fields):
    return {**PAYLOAD, "projects": [{**PAYLOAD["projects"][0], **fields}]}


@pytest.mark.parametrize(
    "body",
    [
        {**PAYLOAD, "userName": 123},
        {**PAYLOAD, "date": ["today"]},
        {**PAYLOAD, "projects": {"name": "Billing"}},
        {**PAYLOAD, "projects": ["Billing"]},
        {**PAYLOAD, "additionalEmail": 42},
        {**PAYLOAD, "format": True},
        _with_project(name=7),
        _with_project(startTime=1000),
        _with_project(endTime=None),
        _with_project(description=5),
        [PAYLOAD],
    ],
)
def test_wrongly_typed_fields_are_rejected_as_json(client, mailer, body):
    resp = client.post("/api/generate-report", json=body)

    assert resp.status_code == 400
    assert resp.is_json
    assert resp.get_json()["error"]
    assert mailer.sent == []


def test_one_character_submitter_is_rejected(client, mailer):
    resp = client.post("/api/generate-report", json={**PAYLOAD, "userName": "A"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "userName must be at least 2 characters"}
    assert mailer.sent == []
