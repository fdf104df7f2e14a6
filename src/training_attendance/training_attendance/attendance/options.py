"""Option tables for time-selection controls.

Every builder returns a fresh dict; insertion order is display order.
"""

from __future__ import annotations

from typing import Optional

from ..core.constants import BLANK_TIME_LIMIT_MINUTES, BLANK_TIME_STEP_MINUTES, HOURS_PER_DAY, MINUTES_PER_HOUR


def format_blank_time_label(minutes: int) -> str:
    hour, minute = divmod(minutes, MINUTES_PER_HOUR)
    if hour == 0:
        return f"{minute}m"
    if minute == 0:
        return f"{hour}h"
    return f"{hour}h {minute}m"


def blank_time_options() -> dict[Optional[int], str]:
    options: dict[Optional[int], str] = {None: ""}
    for minutes in range(BLANK_TIME_STEP_MINUTES, BLANK_TIME_LIMIT_MINUTES, BLANK_TIME_STEP_MINUTES):
        options[minutes] = format_blank_time_label(minutes)
    return options


def _zero_padded(count: int) -> dict[int, str]:
    return {i: f"{i:02d}" for i in range(count)}


def hour_options() -> dict[int, str]:
    return _zero_padded(HOURS_PER_DAY)


def minute_options() -> dict[int, str]:
    return _zero_padded(MINUTES_PER_HOUR)
