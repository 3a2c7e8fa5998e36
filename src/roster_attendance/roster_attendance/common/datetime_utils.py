from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from fractions import Fraction
from typing import Iterable

from ..core.constants import ISO_DATE_FORMAT, NANOS_PER_HOUR, NANOS_PER_SECOND
from ..core.exceptions import InvalidRange, InvalidTime, ValidationError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidTime(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def parse_clock_time(day: date, value: str) -> int:
    """Combine a calendar day with an HH:MM clock value into a UTC timestamp (ns)."""
    parts = str(value).strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise InvalidTime(f"Invalid clock time {value!r}, expected HH:MM")

    hour, minute = int(parts[0]), int(parts[1])
    if not 0 <= hour <= 23:
        raise InvalidTime(f"Hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise InvalidTime(f"Minute out of range: {minute}")

    return to_timestamp(datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc))


def hours_between(start: int, end: int) -> Fraction:
    """Exact number of hours from ``start`` to ``end`` (both ns timestamps)."""
    if end <= start:
        raise InvalidRange("Check-out time must be after check-in time")
    return Fraction(end - start, NANOS_PER_HOUR)


def to_timestamp(value: datetime) -> int:
    """Datetime -> nanoseconds since the Unix epoch. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - _EPOCH
    return (delta.days * 86400 + delta.seconds) * NANOS_PER_SECOND + delta.microseconds * 1000


def from_timestamp(value: int) -> datetime:
    """Nanoseconds since the Unix epoch -> aware UTC datetime (sub-microsecond part dropped)."""
    return _EPOCH + timedelta(microseconds=int(value) // 1000)


def timestamp_date(value: int) -> date:
    return from_timestamp(value).date()


def format_clock(value: int) -> str:
    return from_timestamp(value).strftime("%H:%M")


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def require_month(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    if not 1 <= int(year) <= 9999:
        raise ValidationError(f"Invalid year: {year}")


def days_in_month(year: int, month: int) -> int:
    require_month(year, month)
    return calendar.monthrange(int(year), int(month))[1]


def month_days(year: int, month: int) -> list[date]:
    return [date(int(year), int(month), d) for d in range(1, days_in_month(year, month) + 1)]


def expected_working_days(
    year: int,
    month: int,
    *,
    weekend_days: Iterable[int] = (),
    holidays: Iterable[date] = (),
) -> int:
    """Days of the month an employee is expected to work.

    ``weekend_days`` holds ``date.weekday()`` numbers (Monday=0) and
    ``holidays`` explicit dates. With neither supplied every calendar day
    counts, so the result equals ``days_in_month``.
    """
    weekend = {int(d) for d in weekend_days}
    off = set(holidays)
    return sum(1 for d in month_days(year, month) if d.weekday() not in weekend and d not in off)
