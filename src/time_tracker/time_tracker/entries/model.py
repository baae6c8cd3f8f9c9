from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional


@dataclass(frozen=True)
class TimeEntry:
    """One logged work item (a "project" in the UI)."""

    entry_id: str
    name: str
    start_time: str
    end_time: str
    duration_minutes: int
    description: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.entry_id,
            "name": self.name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "duration": self.duration_minutes,
        }
        if self.description:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class TrackerState:
    """Everything the single-page form holds for one browser session.

    Never persisted: it round-trips through the session cookie and is gone
    when the session ends.
    """

    user_name: str = ""
    user_email: str = ""
    selected_date: str = ""
    entries: tuple[TimeEntry, ...] = field(default_factory=tuple)

    def with_entries(self, entries) -> "TrackerState":
        return replace(self, entries=tuple(entries))

    def to_session(self) -> dict[str, Any]:
        return {
            "user_name": self.user_name,
            "user_email": self.user_email,
            "selected_date": self.selected_date,
            "entries": [
                {
                    "entry_id": e.entry_id,
                    "name": e.name,
                    "start_time": e.start_time,
                    "end_time": e.end_time,
                    "duration_minutes": e.duration_minutes,
                    "description": e.description,
                }
                for e in self.entries
            ],
        }

    @classmethod
    def from_session(cls, data: Optional[dict[str, Any]], *, default_date: str) -> "TrackerState":
        if not data:
            return cls(selected_date=default_date)
        return cls(
            user_name=data.get("user_name", ""),
            user_email=data.get("user_email", ""),
            selected_date=data.get("selected_date") or default_date,
            entries=tuple(TimeEntry(**e) for e in data.get("entries", [])),
        )
