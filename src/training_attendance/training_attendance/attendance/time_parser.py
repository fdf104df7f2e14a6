from __future__ import annotations

from typing import Optional

from ..core.constants import HOURS_PER_DAY, MINUTES_PER_HOUR
from ..core.exceptions import TimeParseError


def split_hh_mm(text: str) -> tuple[int, int]:
    """Split an "HH:MM" string into (hour, minute).

    Raises TimeParseError for anything that is not two numeric fields
    within a wall-clock range.
    """

    parts = text.split(":")
    if len(parts) != 2:
        raise TimeParseError(f"Expected HH:MM, got {text!r}")

    hour_s, minute_s = parts
    if not hour_s.isdecimal() or not minute_s.isdecimal():
        raise TimeParseError(f"Expected HH:MM, got {text!r}")

    hour, minute = int(hour_s), int(minute_s)
    if hour >= HOURS_PER_DAY or minute >= MINUTES_PER_HOUR:
        raise TimeParseError(f"Time out of range: {text!r}")
    return hour, minute


def extract_hour(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    return split_hh_mm(text)[0]


def extract_minute(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    return split_hh_mm(text)[1]
