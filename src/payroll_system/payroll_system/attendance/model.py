from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import InvalidPunchError


@dataclass(frozen=True)
class AttendanceRecord:
    """One day's login/logout punches for an employee."""

    employee_id: str
    work_date: date
    login_time: datetime
    logout_time: datetime
    line_no: Optional[int] = None

    def __post_init__(self):
        if self.logout_time < self.login_time:
            raise InvalidPunchError(
                f"Logout time before login time for {self.employee_id} on {self.work_date.isoformat()}"
            )


@dataclass(frozen=True)
class SkippedLine:
    """An attendance line rejected during a batch, kept for reporting."""

    line_no: Optional[int]
    reason: str
    raw: str = ""


@dataclass(frozen=True)
class ParsedRows:
    """Result of reading an attendance source: valid records plus rejects."""

    records: list[AttendanceRecord]
    skipped: list[SkippedLine]
