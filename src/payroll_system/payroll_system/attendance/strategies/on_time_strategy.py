from __future__ import annotations

from datetime import date, datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftPolicy
from .base import ArrivalDecision, ArrivalStrategy


class OnTimeStrategy(ArrivalStrategy):
    """Login within the grace period: credited from shift start, overtime allowed."""

    def decide(self, *, work_date: date, login_time: datetime, policy: ShiftPolicy) -> ArrivalDecision:
        return ArrivalDecision(
            status=AttendanceStatus.ON_TIME,
            effective_start=policy.shift_start(work_date),
            late_hours=0.0,
            overtime_eligible=True,
        )
