"""Example: use the service layer directly (no Flask, no CLI).

Controllers stay thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.common.datetime_utils import parse_date
from src.payroll_system.payroll_system.container import build_container_from_settings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)
    print(container.processing_service.last_report.to_dict())

    salary = container.salary_service.weekly_salary("10001", parse_date("12/27/2023"))
    print(salary.to_dict())


if __name__ == "__main__":
    main()
