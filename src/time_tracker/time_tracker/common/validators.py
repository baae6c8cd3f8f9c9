from __future__ import annotations

from typing import Any, Optional

from ..core.constants import EMAIL_PATTERN, MAX_EMAIL_LENGTH
from ..core.exceptions import ValidationError


def _as_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    v = _as_text(value, field_name).strip()
    if not v:
        raise ValidationError(f"{field_name} is required")
    return v


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_max_length(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def optional_text(value: Any, field_name: str) -> Optional[str]:
    """Trim an optional string; blank means "not given"."""
    return _as_text(value, field_name).strip() or None


def optional_email(value: Any) -> Optional[str]:
    """Trim an optional address; blank means "not given"."""
    v = optional_text(value, "Email")
    if v is None:
        return None
    if len(v) > MAX_EMAIL_LENGTH or not EMAIL_PATTERN.match(v):
        raise ValidationError("Please enter a valid email address")
    return v
