from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, ParsedRows, SkippedLine
from ..attendance.repository import AttendanceRepository
from ..common.week_keys import is_weekend
from ..core.exceptions import DomainError
from .aggregator import HoursAggregator
from .calculator.base import DailyHoursCalculator
from .calculator.standard_calculator import StandardDailyHoursCalculator
from .model import ProcessingReport

logger = logging.getLogger(__name__)


class AttendanceProcessingService:
    """Use case: fold a batch of attendance records into weekly/monthly hours."""

    def __init__(
        self,
        aggregator: HoursAggregator,
        *,
        calculator: Optional[DailyHoursCalculator] = None,
    ):
        self._aggregator = aggregator
        self._calculator = calculator or StandardDailyHoursCalculator()
        self._last_report: Optional[ProcessingReport] = None

    @property
    def aggregator(self) -> HoursAggregator:
        return self._aggregator

    @property
    def last_report(self) -> Optional[ProcessingReport]:
        return self._last_report

    def process(
        self,
        records: Iterable[AttendanceRecord],
        *,
        aggregator: Optional[HoursAggregator] = None,
    ) -> ProcessingReport:
        """Aggregate weekday records into `aggregator` (the service's own by default)."""
        target = aggregator if aggregator is not None else self._aggregator
        processed = 0
        weekend = 0
        skipped: list[SkippedLine] = []

        for record in records:
            if is_weekend(record.work_date):
                weekend += 1
                continue

            try:
                result = self._calculator.calculate(record.work_date, record.login_time, record.logout_time)
                target.update_weekly_maps(record.employee_id, record.work_date, result)
            except DomainError as e:
                logger.warning("Skipping attendance line %s for %s: %s", record.line_no, record.employee_id, e)
                skipped.append(SkippedLine(line_no=record.line_no, reason=str(e)))
                continue
            processed += 1

        return ProcessingReport(processed=processed, weekend=weekend, skipped=skipped)

    def run(self, repository: AttendanceRepository) -> ProcessingReport:
        """Full batch: reset, read, aggregate weekly, roll up monthly once."""
        self._aggregator.reset()
        rows = repository.load()
        report = self.process(rows.records)
        self._aggregator.roll_up_to_monthly()

        report = ProcessingReport(
            processed=report.processed,
            weekend=report.weekend,
            skipped=[*rows.skipped, *report.skipped],
        )
        logger.info(
            "Attendance batch done: processed=%d weekend=%d skipped=%d",
            report.processed,
            report.weekend,
            len(report.skipped),
        )
        self._last_report = report
        return report

    def ingest(self, rows: ParsedRows) -> ProcessingReport:
        """Add uploaded rows to the current totals and rebuild the monthly maps."""
        report = self.process(rows.records)
        self._aggregator.rebuild_monthly()
        return ProcessingReport(
            processed=report.processed,
            weekend=report.weekend,
            skipped=[*rows.skipped, *report.skipped],
        )
