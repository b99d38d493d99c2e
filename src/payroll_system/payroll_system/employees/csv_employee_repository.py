from __future__ import annotations

import csv
import logging
from dataclasses import fields
from pathlib import Path
from typing import Optional, Sequence

from .model import Employee

logger = logging.getLogger(__name__)

_COLUMNS = [f.name for f in fields(Employee)]


class CsvEmployeeRepository:
    """Employee master data from a CSV export; loaded once, then served from memory."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8-sig"):
        self._path = Path(path)
        self._encoding = encoding
        self._by_id: Optional[dict[str, Employee]] = None

    def _load(self) -> dict[str, Employee]:
        if self._by_id is None:
            by_id: dict[str, Employee] = {}
            with self._path.open("r", encoding=self._encoding, errors="replace", newline="") as f:
                reader = csv.reader(f)
                next(reader, None)
                for line_no, row in enumerate(reader, start=2):
                    if not any(v.strip() for v in row):
                        continue
                    if len(row) < len(_COLUMNS):
                        logger.warning("Skipping employee line %d: expected %d fields, got %d", line_no, len(_COLUMNS), len(row))
                        continue
                    values = [v.strip() for v in row[: len(_COLUMNS)]]
                    employee = Employee(**dict(zip(_COLUMNS, values)))
                    if employee.employee_id in by_id:
                        logger.warning("Duplicate employee %s on line %d replaces the earlier row", employee.employee_id, line_no)
                    by_id[employee.employee_id] = employee
            logger.info("Loaded %d employees from %s", len(by_id), self._path)
            self._by_id = by_id
        return self._by_id

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._load().get(employee_id.strip())

    def list_all(self) -> Sequence[Employee]:
        return list(self._load().values())
