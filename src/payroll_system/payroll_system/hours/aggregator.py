"""Weekly and monthly accumulation of daily hour buckets.

One aggregator instance owns the accumulators for a processing run. Parallel
batches should each fill their own instance and `merge` them at the end.
"""

from __future__ import annotations

from datetime import date
from typing import Iterator, Optional, TypeVar

from ..common.week_keys import MonthKey, WeekKey, week_key
from ..core.enums import HourBucket
from .model import DailyHoursResult, HoursSummary

K = TypeVar("K", WeekKey, MonthKey)


def _new_maps() -> dict:
    return {bucket: {} for bucket in HourBucket}


class HoursAggregator:
    def __init__(self):
        self._weekly: dict[HourBucket, dict[WeekKey, float]] = _new_maps()
        self._monthly: dict[HourBucket, dict[MonthKey, float]] = _new_maps()

    def reset(self) -> None:
        self._weekly = _new_maps()
        self._monthly = _new_maps()

    def update_weekly_maps(self, employee_id: str, work_date: date, result: DailyHoursResult) -> WeekKey:
        """Add one day's buckets to its week. Calling twice counts the day twice."""
        key = week_key(work_date, employee_id)
        for bucket, values in self._weekly.items():
            values[key] = values.get(key, 0.0) + result.value(bucket)
        return key

    def roll_up_to_monthly(self) -> None:
        """Sum every weekly entry into the month of its anchor Monday.

        Monthly maps are added to, not replaced: run this once per batch, or
        use `rebuild_monthly` to start over.
        """
        for bucket, weekly in self._weekly.items():
            monthly = self._monthly[bucket]
            for key, hours in weekly.items():
                month = key.month_key()
                monthly[month] = monthly.get(month, 0.0) + hours

    def rebuild_monthly(self) -> None:
        self._monthly = _new_maps()
        self.roll_up_to_monthly()

    def merge(self, other: "HoursAggregator") -> None:
        """Fold another instance's weekly buckets into this one."""
        for bucket, values in other._weekly.items():
            mine = self._weekly[bucket]
            for key, hours in values.items():
                mine[key] = mine.get(key, 0.0) + hours

    def weekly_value(self, bucket: HourBucket, key: WeekKey) -> Optional[float]:
        return self._weekly[bucket].get(key)

    def monthly_value(self, bucket: HourBucket, key: MonthKey) -> Optional[float]:
        return self._monthly[bucket].get(key)

    def weekly_hours(self, key: WeekKey) -> Optional[HoursSummary]:
        """Weekly totals, or None when no attendance was processed for the week."""
        return self._summary(self._weekly, key)

    def monthly_hours(self, key: MonthKey) -> Optional[HoursSummary]:
        return self._summary(self._monthly, key)

    def iter_weekly(self) -> Iterator[HoursSummary]:
        for key in sorted(self._weekly[HourBucket.REGULAR]):
            summary = self.weekly_hours(key)
            if summary:
                yield summary

    def iter_monthly(self) -> Iterator[HoursSummary]:
        for key in sorted(self._monthly[HourBucket.REGULAR]):
            summary = self.monthly_hours(key)
            if summary:
                yield summary

    @staticmethod
    def _summary(maps: dict[HourBucket, dict[K, float]], key: K) -> Optional[HoursSummary]:
        if key not in maps[HourBucket.REGULAR]:
            return None
        return HoursSummary(
            key=key,
            regular=maps[HourBucket.REGULAR][key],
            overtime=maps[HourBucket.OVERTIME].get(key, 0.0),
            undertime=maps[HourBucket.UNDERTIME].get(key, 0.0),
            late=maps[HourBucket.LATE].get(key, 0.0),
        )
