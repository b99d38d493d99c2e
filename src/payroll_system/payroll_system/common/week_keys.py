"""Calendar helpers: week/month aggregation keys and the last-week rule.

Weeks are ISO weeks (Monday first, at least 4 days in the first week of the
year), so a week is identified by its Monday even when it spans a month or
year boundary.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from ..core.constants import LAST_WEEK_WINDOW_DAYS, WEEK_KEY_SEPARATOR
from ..core.exceptions import ValidationError
from .datetime_utils import format_date, parse_date


def _require_employee_id(employee_id: str) -> str:
    if not employee_id or not employee_id.strip():
        raise ValidationError("Employee id is required")
    if WEEK_KEY_SEPARATOR in employee_id:
        raise ValidationError(f"Employee id must not contain {WEEK_KEY_SEPARATOR!r}: {employee_id!r}")
    return employee_id


@dataclass(frozen=True, order=True)
class MonthKey:
    employee_id: str
    year: int
    month: int

    def __post_init__(self):
        _require_employee_id(self.employee_id)
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Invalid month: {self.month}")

    @classmethod
    def for_date(cls, employee_id: str, value: date) -> "MonthKey":
        return cls(employee_id=employee_id, year=value.year, month=value.month)

    def __str__(self) -> str:
        return f"{self.employee_id}{WEEK_KEY_SEPARATOR}{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True, order=True)
class WeekKey:
    """Employee id paired with the Monday that starts the week."""

    employee_id: str
    anchor: date

    def __post_init__(self):
        _require_employee_id(self.employee_id)
        if self.anchor.weekday() != 0:
            raise ValidationError(f"Week anchor must be a Monday: {self.anchor.isoformat()}")

    @classmethod
    def parse(cls, value: str) -> "WeekKey":
        """Parse the ``EMPLOYEE_MM/dd/yyyy`` text form."""
        parts = (value or "").split(WEEK_KEY_SEPARATOR)
        if len(parts) != 2:
            raise ValidationError(f"Invalid week key: {value!r}")
        return cls(employee_id=parts[0], anchor=parse_date(parts[1]))

    def month_key(self) -> MonthKey:
        """The month containing the anchor Monday owns the whole week."""
        return MonthKey.for_date(self.employee_id, self.anchor)

    def __str__(self) -> str:
        return f"{self.employee_id}{WEEK_KEY_SEPARATOR}{format_date(self.anchor)}"


def week_start(value: date) -> date:
    iso_year, iso_week, _ = value.isocalendar()
    return date.fromisocalendar(iso_year, iso_week, 1)


def week_key(value: date, employee_id: str) -> WeekKey:
    return WeekKey(employee_id=employee_id, anchor=week_start(value))


def is_last_week_of_month(value: date) -> bool:
    """True for the trailing 7 days of the month.

    This is a fixed window and is not aligned to Monday-anchored weeks.
    """
    days_in_month = calendar.monthrange(value.year, value.month)[1]
    return value.day > days_in_month - LAST_WEEK_WINDOW_DAYS


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5
