from __future__ import annotations

from ..core.exceptions import ValidationError


def require_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")
    return value


def require_in_range(value: object, field_name: str, low: int, high: int) -> int:
    value = require_int(value, field_name)
    if value < low or value > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}, got {value}")
    return value


def require_non_negative(value: object, field_name: str) -> int:
    value = require_int(value, field_name)
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative, got {value}")
    return value
