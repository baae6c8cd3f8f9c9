from __future__ import annotations

from datetime import datetime

import pytest

from time_tracker.core.exceptions import DeliveryError
from time_tracker.main import create_app


class FakeMailer:
    def __init__(self, error: Exception | None = None):
        self.sent = []
        self.error = error

    def send(self, email) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append(email)


class FakePdfRenderer:
    def __init__(self, fail: bool = False):
        self.calls = []
        self._fail = fail

    def render(self, html: str) -> bytes:
        self.calls.append(html)
        if self._fail:
            raise DeliveryError("browser crashed")
        return b"%PDF-1.7 fake"


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 16, 18, 45, 0)


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def pdf_renderer():
    return FakePdfRenderer()


@pytest.fixture
def app(monkeypatch, mailer, pdf_renderer):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(mailer=mailer, pdf_renderer=pdf_renderer)


@pytest.fixture
def client(app):
    return app.test_client()
