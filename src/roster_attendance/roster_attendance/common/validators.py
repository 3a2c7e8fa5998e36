from __future__ import annotations

from ..core.constants import MAX_OVERTIME_THRESHOLD, MIN_OVERTIME_THRESHOLD
from ..core.exceptions import InvalidThreshold, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return str(value).strip()


def require_threshold(value) -> int:
    """Overtime threshold: whole hours per day within [0, 24]."""
    if isinstance(value, bool):
        raise InvalidThreshold("Overtime threshold must be a whole number of hours")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise InvalidThreshold(f"Overtime threshold must be a whole number of hours, got {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise InvalidThreshold("Overtime threshold must be a whole number of hours")
    if not MIN_OVERTIME_THRESHOLD <= value <= MAX_OVERTIME_THRESHOLD:
        raise InvalidThreshold(
            f"Overtime threshold must be between {MIN_OVERTIME_THRESHOLD} and {MAX_OVERTIME_THRESHOLD}"
        )
    return value
