from __future__ import annotations

from datetime import date, datetime

from ..core.constants import (
    OFFICE_END_HOUR,
    OFFICE_START_HOUR,
    REFERENCE_DATE,
    TIME_FORMAT,
    TIME_SLOT_MINUTES,
)
from ..core.exceptions import ValidationError

# English names regardless of the process locale.
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_time_of_day(value: str) -> datetime:
    """Parse an ``H:MM``/``HH:MM`` string on the fixed reference date."""
    v = (value or "").strip()
    try:
        return datetime.strptime(f"{REFERENCE_DATE} {v}", f"%Y-%m-%d {TIME_FORMAT}")
    except ValueError:
        raise ValidationError(f"Invalid time '{value}' (expected HH:MM)")


def normalize_time(value: str) -> str:
    """Return the zero-padded ``HH:MM`` form so string order matches time order."""
    return parse_time_of_day(value).strftime(TIME_FORMAT)


def format_time_of_day(value: str) -> str:
    """``"09:30"`` -> ``"9:30 AM"``."""
    t = parse_time_of_day(value)
    return f"{_hour12(t.hour)}:{t.minute:02d} {_meridiem(t.hour)}"


def _hour12(hour: int) -> int:
    return hour % 12 or 12


def _meridiem(hour: int) -> str:
    return "AM" if hour < 12 else "PM"


def format_duration(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m"


def format_date_label(value: date) -> str:
    """Long en-US label, e.g. ``Saturday, October 17, 2026``."""
    return f"{DAY_NAMES[value.weekday()]}, {MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def format_timestamp(value: datetime) -> str:
    """en-US short timestamp, e.g. ``10/16/2026, 6:45:00 PM``."""
    return (
        f"{value.month}/{value.day}/{value.year}, "
        f"{_hour12(value.hour)}:{value.minute:02d}:{value.second:02d} {_meridiem(value.hour)}"
    )


def time_options() -> list[tuple[str, str]]:
    """(value, label) pairs for the start/end selects, office hours only."""
    options = []
    for hour in range(OFFICE_START_HOUR, OFFICE_END_HOUR + 1):
        for minute in range(0, 60, TIME_SLOT_MINUTES):
            if hour == OFFICE_END_HOUR and minute > 0:
                continue
            value = f"{hour:02d}:{minute:02d}"
            options.append((value, format_time_of_day(value)))
    return options
