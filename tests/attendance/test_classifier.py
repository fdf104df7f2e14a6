from __future__ import annotations

import pytest

from src.training_attendance.training_attendance.attendance.classifier import AttendanceClassifier
from src.training_attendance.training_attendance.attendance.model import TrainingTime, WorkSchedule
from src.training_attendance.training_attendance.core.enums import AttendanceStatus

NINE = TrainingTime(9, 0)
SIX_PM = TrainingTime(18, 0)


@pytest.fixture
def classifier() -> AttendanceClassifier:
    return AttendanceClassifier()


def test_no_times_recorded_is_none(classifier):
    assert classifier.classify(None, None, NINE, SIX_PM) == AttendanceStatus.NONE


def test_late_start_is_tardy(classifier):
    assert classifier.classify(TrainingTime(9, 15), SIX_PM, NINE, SIX_PM) == AttendanceStatus.TARDY


def test_one_minute_late_is_tardy(classifier):
    assert classifier.classify(TrainingTime(9, 1), SIX_PM, NINE, SIX_PM) == AttendanceStatus.TARDY


def test_exactly_on_time_is_none(classifier):
    assert classifier.classify(NINE, SIX_PM, NINE, SIX_PM) == AttendanceStatus.NONE


def test_early_end_is_leaving_early(classifier):
    assert classifier.classify(NINE, TrainingTime(17, 45), NINE, SIX_PM) == AttendanceStatus.LEAVING_EARLY


def test_late_and_early(classifier):
    status = classifier.classify(TrainingTime(9, 30), TrainingTime(17, 30), NINE, SIX_PM)
    assert status == AttendanceStatus.TARDY_AND_LEAVING_EARLY
    assert status.is_tardy and status.is_leaving_early


@pytest.mark.parametrize(
    "schedule_start, schedule_end",
    [(None, SIX_PM), (NINE, None), (None, None)],
)
def test_unknown_schedule_dominates(classifier, schedule_start, schedule_end):
    status = classifier.classify(TrainingTime(11, 0), TrainingTime(12, 0), schedule_start, schedule_end)
    assert status == AttendanceStatus.NONE


def test_blank_start_only_checks_end(classifier):
    assert classifier.classify(None, TrainingTime(17, 0), NINE, SIX_PM) == AttendanceStatus.LEAVING_EARLY


def test_blank_end_only_checks_start(classifier):
    assert classifier.classify(TrainingTime(10, 0), None, NINE, SIX_PM) == AttendanceStatus.TARDY


def test_midnight_is_not_blank(classifier):
    # 00:00 end is a real time, and earlier than 18:00
    assert classifier.classify(NINE, TrainingTime(0, 0), NINE, SIX_PM) == AttendanceStatus.LEAVING_EARLY


def test_default_schedule_is_nine_to_six(classifier):
    assert classifier.classify_default(TrainingTime(9, 1), SIX_PM) == AttendanceStatus.TARDY
    assert classifier.classify_default(NINE, SIX_PM) == AttendanceStatus.NONE


def test_configured_default_schedule():
    classifier = AttendanceClassifier(standard_schedule=WorkSchedule(TrainingTime(10, 0), TrainingTime(17, 0)))
    assert classifier.classify_default(TrainingTime(9, 30), TrainingTime(17, 0)) == AttendanceStatus.NONE
    assert classifier.classify_default(TrainingTime(10, 1), TrainingTime(16, 59)) == AttendanceStatus.TARDY_AND_LEAVING_EARLY


def test_unknown_default_schedule_always_none():
    classifier = AttendanceClassifier(standard_schedule=WorkSchedule.unknown())
    assert classifier.classify_default(TrainingTime(23, 0), TrainingTime(1, 0)) == AttendanceStatus.NONE


def test_status_labels():
    assert AttendanceStatus.NONE.label == ""
    assert AttendanceStatus.TARDY.label == "Tardy"
    assert not AttendanceStatus.TARDY.is_leaving_early
