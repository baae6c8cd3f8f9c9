from __future__ import annotations

from typing import Iterable, Optional, Union

from ..common.validators import optional_email, require_min_length
from ..core.constants import MIN_NAME_LENGTH
from ..core.enums import ReportFormat
from ..core.exceptions import ValidationError
from ..entries.calculator import compute_stats, sort_by_start
from ..entries.model import TimeEntry
from .model import ReportRequest, parse_report_format


def build_report_payload(
    submitter_name: str,
    date_label: str,
    entries: Iterable[TimeEntry],
    recipient_email: Optional[str] = None,
    report_format: Union[ReportFormat, str, None] = None,
) -> ReportRequest:
    """Assemble the immutable request for one send action.

    Raises ValidationError before anything goes over the wire.
    """
    name = (submitter_name or "").strip()
    if not name:
        raise ValidationError("Please enter your name before sending the report")
    require_min_length(name, "Your name", MIN_NAME_LENGTH)

    ordered = tuple(sort_by_start(entries))
    if not ordered:
        raise ValidationError("Please add at least one project before sending the report")

    if not isinstance(report_format, ReportFormat):
        report_format = parse_report_format(report_format)

    return ReportRequest(
        user_name=name,
        date=date_label,
        entries=ordered,
        stats=compute_stats(ordered),
        additional_email=optional_email(recipient_email),
        report_format=report_format,
    )
