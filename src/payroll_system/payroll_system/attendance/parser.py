"""Turn raw attendance CSV rows into validated records."""

from __future__ import annotations

import csv
import logging
from typing import Iterable, Optional, Sequence, TextIO

from ..common.datetime_utils import parse_date, parse_date_time
from ..core.exceptions import AttendanceParseError, ValidationError
from .model import AttendanceRecord, ParsedRows, SkippedLine

logger = logging.getLogger(__name__)

# Employee #, Last Name, First Name, Date, Log In, Log Out
MIN_FIELDS = 6
EMPLOYEE_COL = 0
DATE_COL = 3
LOGIN_COL = 4
LOGOUT_COL = 5


def parse_attendance_row(fields: Sequence[str], *, line_no: Optional[int] = None) -> AttendanceRecord:
    """Parse one CSV row.

    Raises AttendanceParseError for short rows or bad date/time values and
    InvalidPunchError when logout is before login.
    """
    if len(fields) < MIN_FIELDS:
        raise AttendanceParseError(f"Expected {MIN_FIELDS} fields, got {len(fields)}")

    employee_id = fields[EMPLOYEE_COL].strip()
    if not employee_id:
        raise AttendanceParseError("Missing employee id")

    date_str = fields[DATE_COL]
    try:
        work_date = parse_date(date_str)
        login_time = parse_date_time(date_str, fields[LOGIN_COL])
        logout_time = parse_date_time(date_str, fields[LOGOUT_COL])
    except ValidationError as e:
        raise AttendanceParseError(str(e)) from None

    return AttendanceRecord(
        employee_id=employee_id,
        work_date=work_date,
        login_time=login_time,
        logout_time=logout_time,
        line_no=line_no,
    )


def read_attendance_rows(stream: TextIO | Iterable[str], *, has_header: bool = True) -> ParsedRows:
    records: list[AttendanceRecord] = []
    skipped: list[SkippedLine] = []

    for index, fields in enumerate(csv.reader(stream), start=1):
        if has_header and index == 1:
            continue
        if not any(f.strip() for f in fields):
            continue

        try:
            records.append(parse_attendance_row(fields, line_no=index))
        except ValidationError as e:
            raw = ",".join(fields)
            logger.warning("Skipping attendance line %d (%s): %s", index, e, raw)
            skipped.append(SkippedLine(line_no=index, reason=str(e), raw=raw))

    return ParsedRows(records=records, skipped=skipped)
