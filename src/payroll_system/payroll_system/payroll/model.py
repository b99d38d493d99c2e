from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..hours.model import HoursSummary


@dataclass(frozen=True)
class Deductions:
    sss: float = 0.0
    philhealth: float = 0.0
    pagibig: float = 0.0
    withholding_tax: float = 0.0

    @property
    def mandatory(self) -> float:
        return self.sss + self.philhealth + self.pagibig

    @property
    def total(self) -> float:
        return self.mandatory + self.withholding_tax


@dataclass(frozen=True)
class SalaryBreakdown:
    """Weekly pay for one employee; deductions apply only in the last week of the month."""

    employee_id: str
    week_start: date
    is_last_week_of_month: bool
    weekly_hours: HoursSummary
    monthly_hours: Optional[HoursSummary]
    basic_pay: float
    late_deduction: float
    undertime_deduction: float
    overtime_pay: float
    gross_weekly: float
    allowances: float
    taxable_income: float
    deductions: Deductions
    take_home_pay: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "week_start": self.week_start.isoformat(),
            "is_last_week_of_month": self.is_last_week_of_month,
            "weekly_hours": self.weekly_hours.to_dict(),
            "monthly_hours": self.monthly_hours.to_dict() if self.monthly_hours else None,
            "basic_pay": self.basic_pay,
            "late_deduction": self.late_deduction,
            "undertime_deduction": self.undertime_deduction,
            "overtime_pay": self.overtime_pay,
            "gross_weekly": self.gross_weekly,
            "allowances": self.allowances,
            "taxable_income": self.taxable_income,
            "deductions": asdict(self.deductions),
            "take_home_pay": self.take_home_pay,
        }
