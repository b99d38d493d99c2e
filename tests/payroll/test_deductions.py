import pytest

from src.payroll_system.payroll_system.payroll.deductions import (
    PAG_IBIG_EMPLOYEE,
    philhealth_contribution,
    sss_contribution,
    withholding_tax,
)


@pytest.mark.parametrize(
    "salary, expected",
    [
        (3000, 135.0),
        (3250, 157.5),
        (3749, 157.5),
        (3750, 180.0),
        (24750, 1125.0),
        (90000, 1125.0),
    ],
)
def test_sss_brackets(salary, expected):
    assert sss_contribution(salary) == pytest.approx(expected)


def test_philhealth_employee_share():
    assert philhealth_contribution(30000) == pytest.approx(450.0)


def test_pag_ibig_is_fixed():
    assert PAG_IBIG_EMPLOYEE == 100.0


@pytest.mark.parametrize(
    "taxable, expected",
    [
        (20000, 0.0),
        (20833, 0.0),
        (30000, (30000 - 20833) * 0.20),
        (50000, (50000 - 33333) * 0.25 + 2500),
        (100000, (100000 - 66667) * 0.30 + 10833),
        (200000, (200000 - 166667) * 0.32 + 40833.33),
        (700000, (700000 - 666667) * 0.35 + 200833.33),
    ],
)
def test_withholding_tax_brackets(taxable, expected):
    assert withholding_tax(taxable) == pytest.approx(expected)
