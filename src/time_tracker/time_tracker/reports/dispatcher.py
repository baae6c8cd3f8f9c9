from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

import requests

from ..core.constants import DEFAULT_REPORT_TIMEOUT_SECONDS
from ..core.enums import SendState
from ..core.exceptions import DomainError
from .model import ReportRequest, SendResult

logger = logging.getLogger(__name__)


class ReportTransport(Protocol):
    def post(self, payload: dict[str, Any]) -> tuple[int, Any]:
        """Deliver the JSON payload; return (status code, decoded JSON body)."""

        raise NotImplementedError


class HttpTransport:
    """POST the payload to a report endpoint over HTTP."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_REPORT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def post(self, payload: dict[str, Any]) -> tuple[int, Any]:
        resp = self._session.post(self._url, json=payload, timeout=self._timeout)
        try:
            body = resp.json()
        except ValueError:
            body = {"error": resp.text or f"HTTP {resp.status_code}"}
        return resp.status_code, body


class LocalTransport:
    """Call the endpoint handler in-process (same contract, no network hop)."""

    def __init__(self, handler: Callable[[dict[str, Any]], tuple[Any, int]]):
        self._handler = handler

    def post(self, payload: dict[str, Any]) -> tuple[int, Any]:
        body, status = self._handler(payload)
        return status, body


class ReportDispatcher:
    """Sends one ReportRequest and reports the outcome.

    One dispatcher per user action: IDLE -> SENDING -> SUCCEEDED | FAILED.
    A dispatcher that already left IDLE refuses to send again.
    """

    def __init__(self, transport: ReportTransport):
        self._transport = transport
        self.state = SendState.IDLE

    def send(self, report: ReportRequest) -> SendResult:
        if self.state != SendState.IDLE:
            raise DomainError(f"Report already dispatched (state={self.state.value})")

        self.state = SendState.SENDING
        try:
            status, body = self._transport.post(report.to_payload())
        except requests.RequestException as e:
            logger.warning("Report request failed: %s", e)
            return self._finish(SendResult(ok=False, message=str(e) or "Failed to send report"))

        body = body if isinstance(body, dict) else {}
        if 200 <= status < 300 and body.get("success"):
            return self._finish(SendResult(ok=True, message=str(body.get("message", ""))))
        return self._finish(SendResult(ok=False, message=str(body.get("error") or "Failed to send report")))

    def _finish(self, result: SendResult) -> SendResult:
        self.state = SendState.SUCCEEDED if result.ok else SendState.FAILED
        return result
