from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ..attendance.model import SkippedLine
from ..common.week_keys import MonthKey, WeekKey
from ..core.enums import HourBucket


@dataclass(frozen=True)
class DailyHoursResult:
    """Hour buckets for a single day, in decimal hours."""

    regular: float = 0.0
    overtime: float = 0.0
    undertime: float = 0.0
    late: float = 0.0

    def value(self, bucket: HourBucket) -> float:
        return float(getattr(self, bucket.value))


@dataclass(frozen=True)
class HoursSummary:
    """Accumulated buckets for one week or month key."""

    key: Union[WeekKey, MonthKey]
    regular: float
    overtime: float
    undertime: float
    late: float

    def to_dict(self) -> dict:
        return {
            "key": str(self.key),
            "regular": self.regular,
            "overtime": self.overtime,
            "undertime": self.undertime,
            "late": self.late,
        }


@dataclass(frozen=True)
class ProcessingReport:
    processed: int = 0
    weekend: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "processed": self.processed,
            "weekend": self.weekend,
            "skipped": [{"line_no": s.line_no, "reason": s.reason, "raw": s.raw} for s in self.skipped],
        }
