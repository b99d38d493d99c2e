"""Command-line entrypoint: employee details, weekly hours and weekly salary."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from .common.datetime_utils import format_date, parse_date
from .container import Container, build_container_from_settings
from .core.exceptions import DomainError
from .hours.model import HoursSummary
from .main import configure_logging, load_settings
from .payroll.model import SalaryBreakdown


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weekly hours and salary from attendance exports")
    sub = parser.add_subparsers(dest="command", required=True)

    employee = sub.add_parser("employee", help="Show employee details")
    employee.add_argument("employee_id")

    for name, help_text in (("hours", "Show weekly and monthly hours"), ("salary", "Show weekly salary")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("employee_id")
        cmd.add_argument("date", help="Any date within the week (MM/dd/yyyy)")

    return parser.parse_args(argv)


def _money(label: str, value: float, width: int = 20) -> str:
    return f"{label:<{width}}: PHP {value:,.2f}"


def print_hours(summary: HoursSummary, title: str, out: TextIO) -> None:
    print(f"\n{title}", file=out)
    print(f"{'Regular Hours':<20}: {summary.regular:.2f} hrs", file=out)
    print(f"{'Overtime':<20}: {summary.overtime:.2f} hrs", file=out)
    print(f"{'Under Time':<20}: {summary.undertime:.2f} hrs", file=out)
    print(f"{'Late Time':<20}: {summary.late:.2f} hrs", file=out)


def print_salary(breakdown: SalaryBreakdown, out: TextIO) -> None:
    print_hours(breakdown.weekly_hours, "Actual Weekly Hours", out)

    print(
        f"\nTotal salary for employee {breakdown.employee_id} (Week of {format_date(breakdown.week_start)}):",
        file=out,
    )
    print(_money("+Basic Pay", breakdown.basic_pay), file=out)
    print(_money("-Late", breakdown.late_deduction), file=out)
    print(_money("-Under time", breakdown.undertime_deduction), file=out)
    print(_money("+Over Time", breakdown.overtime_pay), file=out)
    print(_money("+Monthly Allowance", breakdown.allowances), file=out)

    d = breakdown.deductions
    print("\nDeductions:", file=out)
    print(_money("- SSS Contribution", d.sss, 28), file=out)
    print(_money("- PhilHealth Contribution", d.philhealth, 28), file=out)
    print(_money("- Pag-ibig Contribution", d.pagibig, 28), file=out)
    print(_money("- Withholding Tax", d.withholding_tax, 28), file=out)
    print("-" * 44, file=out)
    print("\n" + _money("Take Home Pay", breakdown.take_home_pay, 28), file=out)
    print("=" * 44, file=out)

    if not breakdown.is_last_week_of_month:
        print("\nNo deductions applied (Not the last week of the month).", file=out)


def run(args: argparse.Namespace, container: Container, out: TextIO) -> int:
    service = container.salary_service
    try:
        if args.command == "employee":
            employee = service.get_employee(args.employee_id)
            print("\nEmployee Details:", file=out)
            for label, value in employee.details():
                print(f"{label:<30}: {value}", file=out)
            return 0

        any_date = parse_date(args.date)
        if args.command == "hours":
            weekly = service.weekly_hours(args.employee_id, any_date)
            print_hours(weekly, "Weekly Hours", out)
            print_hours(service.monthly_hours_for_week(weekly), "Monthly Hours", out)
            return 0

        print_salary(service.weekly_salary(args.employee_id, any_date), out)
        return 0
    except DomainError as e:
        print(str(e), file=out)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    settings = load_settings()
    configure_logging(settings)
    container = build_container_from_settings(settings)
    return run(args, container, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
