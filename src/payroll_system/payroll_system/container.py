from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .attendance.csv_attendance_repository import CsvAttendanceRepository
from .attendance.factory import ArrivalStrategyFactory
from .core.constants import DEFAULT_OVERTIME_MULTIPLIER
from .employees.csv_employee_repository import CsvEmployeeRepository
from .hours.aggregator import HoursAggregator
from .hours.calculator.standard_calculator import StandardDailyHoursCalculator
from .hours.service import AttendanceProcessingService
from .payroll.service import SalaryService
from .shifts.model import ShiftPolicy


@dataclass(frozen=True)
class Container:
    employees_repo: CsvEmployeeRepository
    attendance_repo: CsvAttendanceRepository

    shift_policy: ShiftPolicy
    aggregator: HoursAggregator
    processing_service: AttendanceProcessingService
    salary_service: SalaryService

    def reload_attendance(self):
        return self.processing_service.run(self.attendance_repo)


def build_container(
    *,
    data_config: Mapping[str, str],
    shift_config: Optional[Mapping[str, object]] = None,
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
    load: bool = True,
) -> Container:
    employees_repo = CsvEmployeeRepository(str(data_config["employee_csv"]))
    attendance_repo = CsvAttendanceRepository(str(data_config["attendance_csv"]))

    shift_policy = ShiftPolicy.from_settings(shift_config)
    aggregator = HoursAggregator()
    processing_service = AttendanceProcessingService(
        aggregator,
        calculator=StandardDailyHoursCalculator(shift_policy, strategy_factory=ArrivalStrategyFactory()),
    )
    salary_service = SalaryService(employees_repo, aggregator, overtime_multiplier=overtime_multiplier)

    container = Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        shift_policy=shift_policy,
        aggregator=aggregator,
        processing_service=processing_service,
        salary_service=salary_service,
    )
    if load:
        container.reload_attendance()
    return container


def build_container_from_settings(settings, *, load: bool = True) -> Container:
    return build_container(
        data_config=getattr(settings, "DATA_CONFIG"),
        shift_config=getattr(settings, "SHIFT_POLICY", None),
        overtime_multiplier=float(getattr(settings, "OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER)),
        load=load,
    )
