from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime

from ..model import DailyHoursResult


class DailyHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for splitting a day into buckets)."""

    @abstractmethod
    def calculate(self, work_date: date, login_time: datetime, logout_time: datetime) -> DailyHoursResult:
        raise NotImplementedError
