from datetime import date, datetime, time

import pytest

from src.payroll_system.payroll_system.hours.calculator.standard_calculator import StandardDailyHoursCalculator
from src.payroll_system.payroll_system.shifts.model import ShiftPolicy

DAY = date(2023, 12, 26)


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2023, 12, 26, hour, minute)


def test_full_shift_deducts_lunch():
    result = StandardDailyHoursCalculator().calculate(DAY, at(8), at(17))

    assert result.regular == pytest.approx(8.0)
    assert result.overtime == 0.0
    assert result.undertime == 0.0
    assert result.late == 0.0


def test_on_time_with_overtime():
    result = StandardDailyHoursCalculator().calculate(DAY, at(8), at(19))

    assert result.regular == pytest.approx(8.0)
    assert result.overtime == pytest.approx(2.0)
    assert result.undertime == 0.0
    assert result.late == 0.0


def test_login_within_grace_is_credited_from_shift_start():
    result = StandardDailyHoursCalculator().calculate(DAY, at(8, 10), at(18))

    assert result.late == 0.0
    assert result.regular == pytest.approx(8.0)
    assert result.overtime == pytest.approx(1.0)


def test_late_login_forfeits_overtime():
    result = StandardDailyHoursCalculator().calculate(DAY, at(8, 11), at(19))

    assert result.late == pytest.approx(0.1833, abs=1e-4)
    assert result.overtime == 0.0
    assert result.regular == pytest.approx(8.0 - 11 / 60)


def test_early_logout_is_undertime():
    result = StandardDailyHoursCalculator().calculate(DAY, at(8), at(15, 30))

    assert result.undertime == pytest.approx(1.5)
    assert result.regular == pytest.approx(6.5)


def test_partial_lunch_overlap_for_late_arrival():
    result = StandardDailyHoursCalculator().calculate(DAY, at(12, 30), at(17))

    assert result.regular == pytest.approx(4.0)
    assert result.late == pytest.approx(4.5)


def test_logout_during_lunch():
    result = StandardDailyHoursCalculator().calculate(DAY, at(8), at(12, 30))

    assert result.regular == pytest.approx(4.0)
    assert result.undertime == pytest.approx(4.5)


def test_arrival_after_shift_end_earns_no_regular_or_overtime():
    result = StandardDailyHoursCalculator().calculate(DAY, at(18), at(19))

    assert result.regular == 0.0
    assert result.overtime == 0.0
    assert result.undertime == 0.0
    assert result.late == pytest.approx(10.0)


def test_custom_policy_shifts_the_window():
    policy = ShiftPolicy(
        start_time=time(9, 0),
        end_time=time(18, 0),
        grace_minutes=0,
        break_start=time(12, 0),
        break_end=time(12, 30),
    )

    result = StandardDailyHoursCalculator(policy).calculate(DAY, at(9, 1), at(18))

    assert result.late == pytest.approx(1 / 60)
    assert result.regular == pytest.approx(9.0 - 1 / 60 - 0.5)
