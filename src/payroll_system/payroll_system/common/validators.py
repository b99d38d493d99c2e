from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_amount(value: str, field_name: str) -> float:
    """Parse a money amount such as ``"90,000"`` or ``"1,500.50"``."""
    cleaned = require_non_empty(value, field_name).replace(",", "")
    try:
        return float(cleaned)
    except ValueError:
        raise ValidationError(f"{field_name} is not a number: {value!r}") from None
