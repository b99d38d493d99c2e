from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def attendance_csv() -> Path:
    return DATA_DIR / "attendance.csv"


@pytest.fixture
def employees_csv() -> Path:
    return DATA_DIR / "employees.csv"
