"""Statutory contribution and withholding tax tables (PHP, monthly)."""

from __future__ import annotations

SSS_MINIMUM = 135.0
SSS_FLOOR_SALARY = 3250.0
SSS_BRACKET_WIDTH = 500.0
SSS_STEP_AMOUNT = 22.50
SSS_MAX_STEPS = 44

PHILHEALTH_RATE = 0.03
PAG_IBIG_EMPLOYEE = 100.0

# (lower bound, base tax, marginal rate), highest bracket first.
TAX_BRACKETS = [
    (666667.0, 200833.33, 0.35),
    (166667.0, 40833.33, 0.32),
    (66667.0, 10833.0, 0.30),
    (33333.0, 2500.0, 0.25),
    (20833.0, 0.0, 0.20),
]


def sss_contribution(salary: float) -> float:
    if salary < SSS_FLOOR_SALARY:
        return SSS_MINIMUM
    steps = min(int((salary - SSS_FLOOR_SALARY) / SSS_BRACKET_WIDTH) + 1, SSS_MAX_STEPS)
    return SSS_MINIMUM + steps * SSS_STEP_AMOUNT


def philhealth_contribution(salary: float) -> float:
    """Employee share; the employer matches the other half."""
    return (salary * PHILHEALTH_RATE) / 2


def withholding_tax(taxable_income: float) -> float:
    for lower, base, rate in TAX_BRACKETS:
        if taxable_income > lower:
            return (taxable_income - lower) * rate + base
    return 0.0
