from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.datetime_utils import normalize_time
from ..common.validators import optional_email, optional_text, require_min_length, require_non_empty
from ..core.constants import MIN_NAME_LENGTH
from ..core.enums import ReportFormat
from ..core.exceptions import ValidationError
from ..entries.calculator import ReportStats, compute_stats, sort_by_start, validate_entry
from ..entries.model import TimeEntry


def parse_report_format(value: Any) -> Optional[ReportFormat]:
    v = (optional_text(value, "format") or "").lower()
    if not v:
        return None
    try:
        return ReportFormat(v)
    except ValueError:
        raise ValidationError(f"Unsupported report format '{value}'")


def _name(value: Any, field_name: str) -> str:
    return require_min_length(require_non_empty(value, field_name), field_name, MIN_NAME_LENGTH)


@dataclass(frozen=True)
class ReportRequest:
    """Payload of one "send report" action."""

    user_name: str
    date: str
    entries: tuple[TimeEntry, ...]
    stats: ReportStats
    additional_email: Optional[str] = None
    report_format: Optional[ReportFormat] = None

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "userName": self.user_name,
            "date": self.date,
            "projects": [e.to_payload() for e in self.entries],
            "stats": self.stats.to_payload(),
        }
        if self.additional_email:
            data["additionalEmail"] = self.additional_email
        if self.report_format is not None:
            data["format"] = self.report_format.value
        return data

    @classmethod
    def from_payload(cls, data: Any) -> "ReportRequest":
        """Parse the JSON body received by the report endpoint.

        Durations and stats are recomputed from the start/end times instead of
        trusting the client's numbers.
        """
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        user_name = _name(data.get("userName"), "userName")
        date_label = require_non_empty(data.get("date"), "date")

        projects = data.get("projects")
        if not isinstance(projects, list) or not projects:
            raise ValidationError("projects must be a non-empty list")

        entries = []
        for index, p in enumerate(projects, start=1):
            if not isinstance(p, dict):
                raise ValidationError(f"projects[{index}] must be an object")
            start = normalize_time(require_non_empty(p.get("startTime"), "startTime"))
            end = normalize_time(require_non_empty(p.get("endTime"), "endTime"))
            entries.append(
                TimeEntry(
                    entry_id=str(p.get("id") or index),
                    name=_name(p.get("name"), "name"),
                    start_time=start,
                    end_time=end,
                    duration_minutes=validate_entry(start, end),
                    description=optional_text(p.get("description"), "description"),
                )
            )

        ordered = tuple(sort_by_start(entries))
        return cls(
            user_name=user_name,
            date=date_label,
            entries=ordered,
            stats=compute_stats(ordered),
            additional_email=optional_email(data.get("additionalEmail")),
            report_format=parse_report_format(data.get("format")),
        )


@dataclass(frozen=True)
class SendResult:
    ok: bool
    message: str
