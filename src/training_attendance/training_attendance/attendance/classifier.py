from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import DEFAULT_WORK_END_TIME, DEFAULT_WORK_START_TIME
from ..core.enums import AttendanceStatus
from .model import TrainingTime, WorkSchedule


def standard_work_schedule() -> WorkSchedule:
    return WorkSchedule.from_strings(DEFAULT_WORK_START_TIME, DEFAULT_WORK_END_TIME)


@dataclass(frozen=True)
class AttendanceClassifier:
    """Decide tardy / leaving-early status against a workday schedule.

    Arriving exactly at the scheduled start or leaving exactly at the
    scheduled end is on time; one minute past either boundary counts.
    """

    standard_schedule: WorkSchedule = field(default_factory=standard_work_schedule)

    def classify(
        self,
        actual_start: Optional[TrainingTime],
        actual_end: Optional[TrainingTime],
        schedule_start: Optional[TrainingTime],
        schedule_end: Optional[TrainingTime],
    ) -> AttendanceStatus:
        if schedule_start is None or schedule_end is None:
            return AttendanceStatus.NONE

        is_late = actual_start is not None and actual_start > schedule_start
        is_early = actual_end is not None and actual_end < schedule_end

        if is_late and is_early:
            return AttendanceStatus.TARDY_AND_LEAVING_EARLY
        if is_late:
            return AttendanceStatus.TARDY
        if is_early:
            return AttendanceStatus.LEAVING_EARLY
        return AttendanceStatus.NONE

    def classify_schedule(
        self,
        actual_start: Optional[TrainingTime],
        actual_end: Optional[TrainingTime],
        schedule: WorkSchedule,
    ) -> AttendanceStatus:
        return self.classify(actual_start, actual_end, schedule.start, schedule.end)

    def classify_default(
        self,
        actual_start: Optional[TrainingTime],
        actual_end: Optional[TrainingTime],
    ) -> AttendanceStatus:
        """Classify against the standard workday this classifier was built with."""

        return self.classify_schedule(actual_start, actual_end, self.standard_schedule)
