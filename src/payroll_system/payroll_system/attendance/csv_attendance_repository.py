from __future__ import annotations

import logging
from pathlib import Path

from .model import ParsedRows
from .parser import read_attendance_rows

logger = logging.getLogger(__name__)


class CsvAttendanceRepository:
    """Attendance rows from a CSV export (one header line)."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8-sig"):
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ParsedRows:
        # A missing or unreadable file is fatal for the caller; let OSError propagate.
        # Undecodable bytes are replaced so one bad line cannot abort the batch.
        with self._path.open("r", encoding=self._encoding, errors="replace", newline="") as f:
            rows = read_attendance_rows(f)
        logger.info(
            "Read %d attendance records from %s (%d rejected)",
            len(rows.records),
            self._path,
            len(rows.skipped),
        )
        return rows
