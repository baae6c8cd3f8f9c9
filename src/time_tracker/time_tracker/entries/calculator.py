"""Duration and summary arithmetic for logged entries.

Everything here is pure: no I/O, no clock, no session.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ..common.datetime_utils import format_duration, parse_time_of_day
from ..core.exceptions import ValidationError
from .model import TimeEntry


@dataclass(frozen=True)
class ReportStats:
    total_entries: int
    total_minutes: int
    average_minutes: int

    def to_payload(self) -> dict[str, Any]:
        return {
            "totalProjects": self.total_entries,
            "totalTime": format_duration(self.total_minutes),
            "averageTime": format_duration(self.average_minutes),
            "totalTimeMinutes": self.total_minutes,
        }


def compute_duration(start: str, end: str) -> int:
    """Signed number of minutes from ``start`` to ``end`` on the same day."""
    delta = parse_time_of_day(end) - parse_time_of_day(start)
    return int(delta.total_seconds() // 60)


def validate_entry(start: str, end: str) -> int:
    minutes = compute_duration(start, end)
    if minutes <= 0:
        raise ValidationError("End time must be after start time")
    return minutes


def _round_half_up(total: int, count: int) -> int:
    return (2 * total + count) // (2 * count)


def compute_stats(entries: Iterable[TimeEntry]) -> ReportStats:
    durations = [int(e.duration_minutes) for e in entries]
    count = len(durations)
    total = sum(durations)
    average = _round_half_up(total, count) if count > 0 else 0
    return ReportStats(total_entries=count, total_minutes=total, average_minutes=average)


def sort_by_start(entries: Iterable[TimeEntry]) -> list[TimeEntry]:
    """Stable sort on the zero-padded ``HH:MM`` start time."""
    return sorted(entries, key=lambda e: e.start_time)
