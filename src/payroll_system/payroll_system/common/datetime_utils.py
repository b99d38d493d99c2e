from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_date(value: str, *patterns: str) -> date:
    """Parse a date string, trying each pattern in turn (MM/dd/yyyy by default)."""
    value = (value or "").strip()
    for pattern in patterns or (DATE_FORMAT,):
        try:
            return datetime.strptime(value, pattern).date()
        except ValueError:
            continue
    raise ValidationError(f"Invalid date format: {value!r}")


def parse_time(value: str) -> time:
    value = (value or "").strip()
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time format: {value!r}") from None


def parse_date_time(date_str: str, time_str: str) -> datetime:
    """Combine a MM/dd/yyyy date and an HH:mm time into one timestamp."""
    return datetime.combine(parse_date(date_str), parse_time(time_str))


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def hours_between(start: datetime, end: datetime) -> float:
    """Exact difference in decimal hours (negative when end < start)."""
    return (end - start).total_seconds() / 3600.0
