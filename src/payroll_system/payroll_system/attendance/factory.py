from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..shifts.model import ShiftPolicy
from .strategies.base import ArrivalStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class ArrivalStrategyFactory:
    """Factory Pattern: choose the arrival strategy from the grace period."""

    def for_login(self, *, work_date: date, login_time: datetime, policy: ShiftPolicy) -> ArrivalStrategy:
        # Grace boundary is inclusive: 08:10 with a 10 minute grace is on time.
        if login_time <= policy.grace_period_end(work_date):
            return OnTimeStrategy()
        return LateStrategy()
