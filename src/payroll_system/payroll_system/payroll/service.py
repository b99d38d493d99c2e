from __future__ import annotations

from datetime import date

from ..common.datetime_utils import format_date
from ..common.week_keys import MonthKey, is_last_week_of_month, week_key
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER, WEEKS_PER_MONTH
from ..core.exceptions import EmployeeNotFoundError, NoAttendanceDataError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..hours.aggregator import HoursAggregator
from ..hours.model import HoursSummary
from . import deductions as tables
from .model import Deductions, SalaryBreakdown


class SalaryService:
    """Use case: assemble an employee's weekly pay from aggregated hours."""

    def __init__(
        self,
        employees: EmployeeRepository,
        hours: HoursAggregator,
        *,
        overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
    ):
        self._employees = employees
        self._hours = hours
        self._overtime_multiplier = float(overtime_multiplier)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(f"Employee not found: {employee_id}")
        return employee

    def weekly_hours(self, employee_id: str, any_date: date) -> HoursSummary:
        key = week_key(any_date, employee_id)
        summary = self._hours.weekly_hours(key)
        if summary is None:
            raise NoAttendanceDataError(
                f"No attendance data for employee {employee_id} in the week of {format_date(key.anchor)}"
            )
        return summary

    def monthly_hours(self, employee_id: str, any_date: date) -> HoursSummary:
        key = MonthKey.for_date(employee_id, any_date)
        return self.monthly_hours_by_key(key)

    def monthly_hours_for_week(self, week: HoursSummary) -> HoursSummary:
        """Totals of the month that owns the week (the month of its Monday)."""
        return self.monthly_hours_by_key(week.key.month_key())

    def monthly_hours_by_key(self, key: MonthKey) -> HoursSummary:
        summary = self._hours.monthly_hours(key)
        if summary is None:
            raise NoAttendanceDataError(f"No attendance data for {key}")
        return summary

    def weekly_salary(self, employee_id: str, any_date: date) -> SalaryBreakdown:
        employee = self.get_employee(employee_id)
        pay = employee.compensation()
        week = self.weekly_hours(employee_id, any_date)
        rate = pay.hourly_rate

        basic_pay = pay.basic_salary / WEEKS_PER_MONTH
        late = week.late * rate
        undertime = week.undertime * rate
        overtime_pay = week.overtime * rate * self._overtime_multiplier
        gross_weekly = basic_pay - late - undertime + overtime_pay

        last_week = is_last_week_of_month(any_date)
        if not last_week:
            return SalaryBreakdown(
                employee_id=employee_id,
                week_start=week.key.anchor,
                is_last_week_of_month=False,
                weekly_hours=week,
                monthly_hours=None,
                basic_pay=basic_pay,
                late_deduction=late,
                undertime_deduction=undertime,
                overtime_pay=overtime_pay,
                gross_weekly=gross_weekly,
                allowances=0.0,
                taxable_income=0.0,
                deductions=Deductions(),
                take_home_pay=gross_weekly,
            )

        month = self.monthly_hours(employee_id, any_date)
        allowances = pay.total_allowance
        contributions = Deductions(
            sss=tables.sss_contribution(pay.basic_salary),
            philhealth=tables.philhealth_contribution(pay.basic_salary),
            pagibig=tables.PAG_IBIG_EMPLOYEE,
        )

        # Monthly late/undertime reduce taxable income; weekly overtime counts toward it.
        gross_monthly_income = pay.basic_salary + allowances + overtime_pay
        taxable = gross_monthly_income - (month.late * rate + month.undertime * rate + contributions.mandatory)
        tax = tables.withholding_tax(taxable)
        final = Deductions(
            sss=contributions.sss,
            philhealth=contributions.philhealth,
            pagibig=contributions.pagibig,
            withholding_tax=tax,
        )

        return SalaryBreakdown(
            employee_id=employee_id,
            week_start=week.key.anchor,
            is_last_week_of_month=True,
            weekly_hours=week,
            monthly_hours=month,
            basic_pay=basic_pay,
            late_deduction=late,
            undertime_deduction=undertime,
            overtime_pay=overtime_pay,
            gross_weekly=gross_weekly,
            allowances=allowances,
            taxable_income=taxable,
            deductions=final,
            take_home_pay=gross_weekly + allowances - final.total,
        )
