from __future__ import annotations

from datetime import date, datetime

from ...common.datetime_utils import hours_between
from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftPolicy
from .base import ArrivalDecision, ArrivalStrategy


class LateStrategy(ArrivalStrategy):
    """Login after the grace period.

    Late time runs from shift start (not from the end of the grace period),
    work is credited from the actual login and overtime is forfeited.
    """

    def decide(self, *, work_date: date, login_time: datetime, policy: ShiftPolicy) -> ArrivalDecision:
        return ArrivalDecision(
            status=AttendanceStatus.LATE,
            effective_start=login_time,
            late_hours=hours_between(policy.shift_start(work_date), login_time),
            overtime_eligible=False,
        )
