from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Callable, Optional

from ..common.datetime_utils import normalize_time, parse_iso_date
from ..common.validators import (
    optional_email,
    optional_text,
    require_max_length,
    require_min_length,
    require_non_empty,
)
from ..core.constants import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH, MIN_NAME_LENGTH
from ..core.exceptions import ValidationError
from .calculator import ReportStats, compute_stats, sort_by_start, validate_entry
from .model import TimeEntry, TrackerState

logger = logging.getLogger(__name__)


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def _checked_name(value: Optional[str], field_name: str) -> str:
    name = require_min_length(require_non_empty(value, field_name), field_name, MIN_NAME_LENGTH)
    return require_max_length(name, field_name, MAX_NAME_LENGTH)


class TrackerService:
    """State transitions of the tracker form.

    Every method takes the current ``TrackerState`` and returns a new one; the
    input state is never modified, so a rejected action leaves it as it was.
    """

    def __init__(self, *, id_factory: Optional[Callable[[], str]] = None):
        self._id_factory = id_factory or _new_entry_id

    def add_entry(
        self,
        state: TrackerState,
        *,
        name: str,
        start_time: str,
        end_time: str,
        description: Optional[str] = None,
    ) -> TrackerState:
        name = _checked_name(name, "Project name")
        description = require_max_length(
            optional_text(description, "Description"), "Description", MAX_DESCRIPTION_LENGTH
        )
        start = normalize_time(require_non_empty(start_time, "Start time"))
        end = normalize_time(require_non_empty(end_time, "End time"))
        minutes = validate_entry(start, end)

        entry = TimeEntry(
            entry_id=self._id_factory(),
            name=name,
            start_time=start,
            end_time=end,
            duration_minutes=minutes,
            description=description,
        )
        logger.debug("Added entry %s (%s-%s, %d min)", entry.entry_id, start, end, minutes)
        return state.with_entries([*state.entries, entry])

    def remove_entry(self, state: TrackerState, entry_id: str) -> TrackerState:
        return state.with_entries(e for e in state.entries if e.entry_id != entry_id)

    def clear_entries(self, state: TrackerState) -> TrackerState:
        return state.with_entries(())

    def update_profile(
        self,
        state: TrackerState,
        *,
        user_name: str,
        user_email: str,
        selected_date: str,
    ) -> TrackerState:
        # A blank name is allowed here; sending still requires one.
        name = optional_text(user_name, "Your name")
        if name is not None:
            name = _checked_name(name, "Your name")
        email = optional_email(user_email) or ""
        date_s = (selected_date or "").strip() or state.selected_date
        try:
            parse_iso_date(date_s)
        except ValueError:
            raise ValidationError("Date is required (YYYY-MM-DD)")
        return replace(state, user_name=name or "", user_email=email, selected_date=date_s)

    @staticmethod
    def timeline(state: TrackerState) -> list[TimeEntry]:
        return sort_by_start(state.entries)

    @staticmethod
    def stats(state: TrackerState) -> ReportStats:
        return compute_stats(state.entries)
