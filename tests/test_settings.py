from datetime import time

import pytest

from config import get_settings_module
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.shifts.model import ShiftPolicy


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_settings_module_default(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_shift_policy_defaults():
    policy = ShiftPolicy.from_settings(None)

    assert policy.start_time == time(8, 0)
    assert policy.end_time == time(17, 0)
    assert policy.grace_minutes == 10
    assert (policy.break_start, policy.break_end) == (time(12, 0), time(13, 0))


def test_shift_policy_from_settings_overrides():
    policy = ShiftPolicy.from_settings({"start": "09:00", "end": "18:00", "grace_minutes": "5"})

    assert policy.start_time == time(9, 0)
    assert policy.grace_minutes == 5
    assert policy.break_end == time(13, 0)


@pytest.mark.parametrize(
    "raw",
    [
        {"start": "17:00", "end": "08:00"},
        {"break_start": "13:00", "break_end": "12:00"},
        {"grace_minutes": -1},
        {"grace_minutes": "ten"},
        {"start": "8am"},
    ],
)
def test_shift_policy_rejects_bad_settings(raw):
    with pytest.raises(ValidationError):
        ShiftPolicy.from_settings(raw)
