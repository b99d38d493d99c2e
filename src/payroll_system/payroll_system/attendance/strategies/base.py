from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftPolicy


@dataclass(frozen=True)
class ArrivalDecision:
    status: AttendanceStatus
    effective_start: datetime
    late_hours: float
    overtime_eligible: bool


class ArrivalStrategy(ABC):
    """Strategy Pattern: encapsulate how an arrival is credited."""

    @abstractmethod
    def decide(self, *, work_date: date, login_time: datetime, policy: ShiftPolicy) -> ArrivalDecision:
        raise NotImplementedError
