from __future__ import annotations

from enum import Enum


class ReportFormat(str, Enum):
    """Attachment format requested for the emailed report."""

    PDF = "pdf"
    HTML = "html"


class SendState(str, Enum):
    """Lifecycle of a single report send action."""

    IDLE = "IDLE"
    SENDING = "SENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
