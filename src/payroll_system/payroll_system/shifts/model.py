from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Mapping

from ..common.datetime_utils import parse_time
from ..core.constants import (
    DEFAULT_BREAK_END,
    DEFAULT_BREAK_START,
    DEFAULT_GRACE_MINUTES,
    DEFAULT_SHIFT_END,
    DEFAULT_SHIFT_START,
)
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftPolicy:
    """Standard shift used to split a day's punches into hour buckets."""

    start_time: time = parse_time(DEFAULT_SHIFT_START)
    end_time: time = parse_time(DEFAULT_SHIFT_END)
    grace_minutes: int = DEFAULT_GRACE_MINUTES
    break_start: time = parse_time(DEFAULT_BREAK_START)
    break_end: time = parse_time(DEFAULT_BREAK_END)

    def __post_init__(self):
        if self.end_time <= self.start_time:
            raise ValidationError("Shift end must be after shift start")
        if self.break_end < self.break_start:
            raise ValidationError("Break end must not be before break start")
        if self.grace_minutes < 0:
            raise ValidationError("Grace period cannot be negative")

    @classmethod
    def from_settings(cls, raw: Mapping[str, object] | None) -> "ShiftPolicy":
        raw = raw or {}
        try:
            grace_minutes = int(raw.get("grace_minutes", DEFAULT_GRACE_MINUTES))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid grace_minutes: {raw.get('grace_minutes')!r}") from None
        return cls(
            start_time=parse_time(str(raw.get("start", DEFAULT_SHIFT_START))),
            end_time=parse_time(str(raw.get("end", DEFAULT_SHIFT_END))),
            grace_minutes=grace_minutes,
            break_start=parse_time(str(raw.get("break_start", DEFAULT_BREAK_START))),
            break_end=parse_time(str(raw.get("break_end", DEFAULT_BREAK_END))),
        )

    def shift_start(self, work_date: date) -> datetime:
        return datetime.combine(work_date, self.start_time)

    def shift_end(self, work_date: date) -> datetime:
        return datetime.combine(work_date, self.end_time)

    def grace_period_end(self, work_date: date) -> datetime:
        return self.shift_start(work_date) + timedelta(minutes=self.grace_minutes)

    def break_window(self, work_date: date) -> tuple[datetime, datetime]:
        return datetime.combine(work_date, self.break_start), datetime.combine(work_date, self.break_end)
