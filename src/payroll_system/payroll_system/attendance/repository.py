from __future__ import annotations

from typing import Protocol

from .model import ParsedRows


class AttendanceRepository(Protocol):
    def load(self) -> ParsedRows:
        """Read every attendance row; rejected rows are returned, not raised."""

        raise NotImplementedError
