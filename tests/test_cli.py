from __future__ import annotations

import io

import pytest

from src.payroll_system.payroll_system.cli import parse_args, run
from src.payroll_system.payroll_system.container import build_container


@pytest.fixture
def container(attendance_csv, employees_csv):
    return build_container(
        data_config={"attendance_csv": str(attendance_csv), "employee_csv": str(employees_csv)},
    )


def run_cli(container, *argv: str) -> tuple[int, str]:
    out = io.StringIO()
    code = run(parse_args(list(argv)), container, out)
    return code, out.getvalue()


def test_employee_details(container):
    code, text = run_cli(container, "employee", "10002")

    assert code == 0
    assert "Chief Operating Officer" in text
    assert "Garcia, Manuel III" in text


def test_mid_month_salary(container):
    code, text = run_cli(container, "salary", "10001", "12/06/2023")

    assert code == 0
    assert "Week of 12/04/2023" in text
    assert "PHP 20,000.00" in text
    assert "Take Home Pay               : PHP 20,500.00" in text
    assert "No deductions applied" in text


def test_last_week_salary_lists_deductions(container):
    code, text = run_cli(container, "salary", "10001", "12/27/2023")

    assert code == 0
    assert "- SSS Contribution          : PHP 1,125.00" in text
    assert "No deductions applied" not in text


def test_hours(container):
    code, text = run_cli(container, "hours", "10001", "12/05/2023")

    assert code == 0
    assert "Regular Hours       : 22.50 hrs" in text


@pytest.mark.parametrize(
    "argv, message",
    [
        (("employee", "99999"), "Employee not found"),
        (("salary", "10002", "12/06/2023"), "No attendance data"),
        (("salary", "10001", "2023-12-06"), "Invalid date format"),
    ],
)
def test_errors_exit_non_zero(container, argv, message):
    code, text = run_cli(container, *argv)

    assert code == 1
    assert message in text


def test_hours_for_week_starting_in_previous_month(tmp_path, employees_csv):
    attendance = tmp_path / "attendance.csv"
    attendance.write_text(
        "Employee #,Last Name,First Name,Date,Log In,Log Out\n"
        "10001,Garcia,Manuel III,03/01/2024,8:00,17:00\n",
        encoding="utf-8",
    )
    container = build_container(
        data_config={"attendance_csv": str(attendance), "employee_csv": str(employees_csv)},
    )

    code, text = run_cli(container, "hours", "10001", "03/01/2024")

    assert code == 0
    assert "Monthly Hours" in text
    assert text.count("Regular Hours       : 8.00 hrs") == 2
