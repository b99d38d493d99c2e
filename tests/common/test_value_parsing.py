from datetime import date, datetime

import pytest

from src.payroll_system.payroll_system.common.datetime_utils import hours_between, parse_date, parse_date_time
from src.payroll_system.payroll_system.common.validators import parse_amount
from src.payroll_system.payroll_system.core.exceptions import ValidationError


def test_parse_date_default_and_alternate_patterns():
    assert parse_date("12/25/2023") == date(2023, 12, 25)
    assert parse_date("2023-12-25", "%m/%d/%Y", "%Y-%m-%d") == date(2023, 12, 25)

    with pytest.raises(ValidationError):
        parse_date("25/12/2023")


def test_parse_date_time_accepts_single_digit_hour():
    assert parse_date_time("12/25/2023", "8:05") == datetime(2023, 12, 25, 8, 5)

    with pytest.raises(ValidationError):
        parse_date_time("12/25/2023", "8am")


def test_hours_between_is_exact():
    assert hours_between(datetime(2023, 1, 2, 8, 0), datetime(2023, 1, 2, 8, 11)) == pytest.approx(11 / 60)


def test_parse_amount_strips_thousands_separator():
    assert parse_amount("90,000", "Basic Salary") == 90000.0
    assert parse_amount(" 1,500.50 ", "Rice Subsidy") == 1500.5

    with pytest.raises(ValidationError):
        parse_amount("N/A", "Hourly Rate")
    with pytest.raises(ValidationError):
        parse_amount("", "Hourly Rate")
