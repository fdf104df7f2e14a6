from __future__ import annotations

from datetime import time

import pytest

from src.training_attendance.training_attendance.attendance.duration import to_hour_minute
from src.training_attendance.training_attendance.attendance.model import TrainingTime, WorkSchedule
from src.training_attendance.training_attendance.core.exceptions import TimeParseError, ValidationError


def test_training_time_orders_chronologically():
    assert TrainingTime(9, 59) < TrainingTime(10, 0)
    assert TrainingTime(0, 0) < TrainingTime(0, 1)
    assert TrainingTime(12, 30) == TrainingTime(12, 30)


@pytest.mark.parametrize("hour, minute", [(24, 0), (-1, 0), (0, 60), (0, -1)])
def test_training_time_rejects_out_of_range(hour, minute):
    with pytest.raises(ValidationError):
        TrainingTime(hour, minute)


def test_training_time_parse_and_str():
    t = TrainingTime.parse("07:05")
    assert t == TrainingTime(7, 5)
    assert str(t) == "07:05"
    assert t.total_minutes == 425


def test_training_time_parse_rejects_garbage():
    with pytest.raises(TimeParseError):
        TrainingTime.parse("7h05")


def test_training_time_from_time_drops_seconds():
    assert TrainingTime.from_time(time(8, 30, 59)) == TrainingTime(8, 30)


def test_work_schedule_from_strings():
    schedule = WorkSchedule.from_strings("09:00", "")
    assert schedule.start == TrainingTime(9, 0)
    assert schedule.end is None
    assert not schedule.is_known
    assert WorkSchedule.from_strings("09:00", "18:00").is_known


def test_to_hour_minute():
    assert to_hour_minute(125) == TrainingTime(2, 5)
    assert to_hour_minute(0) == TrainingTime(0, 0)
    assert to_hour_minute(60) == TrainingTime(1, 0)


def test_to_hour_minute_rejects_negative():
    with pytest.raises(ValidationError):
        to_hour_minute(-1)


def test_to_hour_minute_rejects_full_day():
    with pytest.raises(ValidationError):
        to_hour_minute(24 * 60)
