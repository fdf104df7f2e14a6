from __future__ import annotations

from ..common.validators import require_non_negative
from ..core.constants import HOURS_PER_DAY, MINUTES_PER_HOUR
from ..core.exceptions import ValidationError
from .model import TrainingTime


def to_hour_minute(total_minutes: int) -> TrainingTime:
    """Split whole minutes (e.g. a blank/away duration) into hours and minutes."""

    total_minutes = require_non_negative(total_minutes, "total_minutes")
    hour, minute = divmod(total_minutes, MINUTES_PER_HOUR)
    if hour >= HOURS_PER_DAY:
        raise ValidationError(f"Duration must be shorter than {HOURS_PER_DAY} hours, got {total_minutes} minutes")
    return TrainingTime(hour, minute)
