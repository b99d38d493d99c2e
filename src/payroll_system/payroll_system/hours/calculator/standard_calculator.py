from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...attendance.factory import ArrivalStrategyFactory
from ...common.datetime_utils import hours_between
from ...shifts.model import ShiftPolicy
from ..model import DailyHoursResult
from .base import DailyHoursCalculator


class StandardDailyHoursCalculator(DailyHoursCalculator):
    """Standard rule for one day against a fixed shift.

    - regular: from the credited start (shift start when on time, login
      otherwise) to min(logout, shift end), minus any overlap with the break
    - overtime: time past shift end, only when on time
    - undertime: time between logout and shift end
    - late: time from shift start to login, only past the grace period

    No value is ever negative; a day whose credited start is after its
    regular end simply earns zero regular hours.
    """

    def __init__(
        self,
        policy: Optional[ShiftPolicy] = None,
        *,
        strategy_factory: Optional[ArrivalStrategyFactory] = None,
    ):
        self._policy = policy or ShiftPolicy()
        self._factory = strategy_factory or ArrivalStrategyFactory()

    @property
    def policy(self) -> ShiftPolicy:
        return self._policy

    def calculate(self, work_date: date, login_time: datetime, logout_time: datetime) -> DailyHoursResult:
        policy = self._policy
        strategy = self._factory.for_login(work_date=work_date, login_time=login_time, policy=policy)
        decision = strategy.decide(work_date=work_date, login_time=login_time, policy=policy)

        shift_end = policy.shift_end(work_date)
        regular_end = min(logout_time, shift_end)

        break_start, break_end = policy.break_window(work_date)
        overlap = max(0.0, hours_between(max(decision.effective_start, break_start), min(regular_end, break_end)))
        regular = max(0.0, hours_between(decision.effective_start, regular_end) - overlap)

        overtime = max(0.0, hours_between(shift_end, logout_time)) if decision.overtime_eligible else 0.0
        undertime = hours_between(logout_time, shift_end) if logout_time < shift_end else 0.0

        return DailyHoursResult(
            regular=regular,
            overtime=overtime,
            undertime=undertime,
            late=decision.late_hours,
        )
