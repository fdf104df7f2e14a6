from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.validators import require_in_range
from ..core.constants import HOURS_PER_DAY, MINUTES_PER_HOUR
from .time_parser import split_hh_mm


@dataclass(frozen=True, order=True)
class TrainingTime:
    """Wall-clock time of day (hour, minute).

    A blank time is represented by ``None`` wherever a TrainingTime is
    optional; 00:00 is a real value.
    """

    hour: int
    minute: int

    def __post_init__(self) -> None:
        require_in_range(self.hour, "hour", 0, HOURS_PER_DAY - 1)
        require_in_range(self.minute, "minute", 0, MINUTES_PER_HOUR - 1)

    @classmethod
    def parse(cls, text: str) -> "TrainingTime":
        hour, minute = split_hh_mm(text)
        return cls(hour, minute)

    @classmethod
    def from_time(cls, value: time) -> "TrainingTime":
        return cls(value.hour, value.minute)

    @property
    def total_minutes(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class WorkSchedule:
    """Expected start/end of a workday; either end may be unknown."""

    start: Optional[TrainingTime] = None
    end: Optional[TrainingTime] = None

    @classmethod
    def unknown(cls) -> "WorkSchedule":
        return cls(None, None)

    @classmethod
    def from_strings(cls, start: Optional[str], end: Optional[str]) -> "WorkSchedule":
        """Build from "HH:MM" settings values; empty values stay unknown."""

        return cls(
            start=TrainingTime.parse(start) if start else None,
            end=TrainingTime.parse(end) if end else None,
        )

    @property
    def is_known(self) -> bool:
        return self.start is not None and self.end is not None
