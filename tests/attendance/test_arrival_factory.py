from datetime import date, datetime

import pytest

from src.payroll_system.payroll_system.attendance.factory import ArrivalStrategyFactory
from src.payroll_system.payroll_system.attendance.strategies.late_strategy import LateStrategy
from src.payroll_system.payroll_system.attendance.strategies.on_time_strategy import OnTimeStrategy
from src.payroll_system.payroll_system.core.enums import AttendanceStatus
from src.payroll_system.payroll_system.shifts.model import ShiftPolicy


def test_factory_login_at_grace_boundary_is_on_time():
    today = date(2023, 12, 26)
    factory = ArrivalStrategyFactory()

    strategy = factory.for_login(work_date=today, login_time=datetime(2023, 12, 26, 8, 10), policy=ShiftPolicy())

    assert isinstance(strategy, OnTimeStrategy)


def test_factory_login_after_grace_is_late():
    today = date(2023, 12, 26)
    factory = ArrivalStrategyFactory()

    strategy = factory.for_login(work_date=today, login_time=datetime(2023, 12, 26, 8, 11), policy=ShiftPolicy())

    assert isinstance(strategy, LateStrategy)


def test_late_strategy_counts_from_shift_start():
    today = date(2023, 12, 26)
    login = datetime(2023, 12, 26, 8, 11)

    decision = LateStrategy().decide(work_date=today, login_time=login, policy=ShiftPolicy())

    assert decision.status == AttendanceStatus.LATE
    assert decision.late_hours == pytest.approx(11 / 60)
    assert decision.effective_start == login
    assert decision.overtime_eligible is False


def test_on_time_strategy_credits_from_shift_start():
    today = date(2023, 12, 26)

    decision = OnTimeStrategy().decide(work_date=today, login_time=datetime(2023, 12, 26, 8, 7), policy=ShiftPolicy())

    assert decision.status == AttendanceStatus.ON_TIME
    assert decision.effective_start == datetime(2023, 12, 26, 8, 0)
    assert decision.late_hours == 0.0
    assert decision.overtime_eligible is True
