from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Arrival status decided against the shift's grace period."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"


class HourBucket(str, Enum):
    """The four hour quantities tracked per week and per month."""

    REGULAR = "regular"
    OVERTIME = "overtime"
    UNDERTIME = "undertime"
    LATE = "late"
