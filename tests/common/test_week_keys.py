from datetime import date, timedelta

import pytest

from src.payroll_system.payroll_system.common.week_keys import (
    MonthKey,
    WeekKey,
    is_last_week_of_month,
    is_weekend,
    week_key,
    week_start,
)
from src.payroll_system.payroll_system.core.exceptions import ValidationError


def test_week_key_anchor_is_always_monday():
    day = date(2023, 1, 1)
    for offset in range(400):
        d = day + timedelta(days=offset)
        assert week_key(d, "10001").anchor.weekday() == 0


def test_same_week_dates_share_key():
    monday = date(2023, 12, 25)
    keys = {week_key(monday + timedelta(days=i), "10001") for i in range(7)}
    assert keys == {WeekKey("10001", monday)}


def test_week_spanning_year_boundary_uses_monday_anchor():
    # Mon 2024-12-30 .. Sun 2025-01-05
    assert week_start(date(2025, 1, 1)) == date(2024, 12, 30)
    assert week_key(date(2025, 1, 5), "A") == week_key(date(2024, 12, 30), "A")


def test_sunday_belongs_to_preceding_monday():
    assert week_start(date(2023, 12, 31)) == date(2023, 12, 25)


def test_week_key_month_follows_anchor():
    key = week_key(date(2024, 3, 1), "10001")  # Friday; Monday is 2024-02-26
    assert key.month_key() == MonthKey("10001", 2024, 2)


def test_week_key_text_form_round_trip():
    key = WeekKey.parse("10001_12/25/2023")
    assert key == WeekKey("10001", date(2023, 12, 25))
    assert str(key) == "10001_12/25/2023"
    assert str(key.month_key()) == "10001_2023-12"


@pytest.mark.parametrize("text", ["10001", "a_b_12/25/2023", "10001_2023-12-25", "10001_12/26/2023"])
def test_week_key_parse_rejects_malformed(text):
    with pytest.raises(ValidationError):
        WeekKey.parse(text)


def test_is_last_week_of_month_trailing_seven_days():
    assert is_last_week_of_month(date(2023, 12, 25))
    assert not is_last_week_of_month(date(2023, 12, 20))
    assert not is_last_week_of_month(date(2023, 12, 24))
    assert is_last_week_of_month(date(2024, 2, 23))  # leap year: 29 - 7 = 22
    assert not is_last_week_of_month(date(2023, 2, 21))


def test_is_weekend():
    assert is_weekend(date(2023, 12, 9))
    assert is_weekend(date(2023, 12, 10))
    assert not is_weekend(date(2023, 12, 8))
