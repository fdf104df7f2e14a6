from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from zoneinfo import ZoneInfo

from .attendance.classifier import AttendanceClassifier
from .attendance.model import WorkSchedule
from .attendance.training_date import TrainingDateResolver
from .common.datetime_utils import DateNormalizer
from .core.constants import DEFAULT_DATE_FORMAT, DEFAULT_WORK_END_TIME, DEFAULT_WORK_START_TIME
from .database.connection import DBConfig, DatabaseConnection
from .sections.mysql_section_repository import MySQLSectionRepository
from .sections.repository import TrainingDayLookup
from .sections.service import WorkDayChecker


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    sections_repo: TrainingDayLookup

    date_normalizer: DateNormalizer
    classifier: AttendanceClassifier
    training_date_resolver: TrainingDateResolver
    work_day_checker: WorkDayChecker


def build_container(*, settings: Any, sections_repo: TrainingDayLookup | None = None) -> Container:
    """Wire services from a settings module (see ``config``).

    ``sections_repo`` replaces the MySQL lookup, e.g. with an in-memory one.
    """

    conn = None
    if sections_repo is None:
        conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        sections_repo = MySQLSectionRepository(conn)

    schedule = WorkSchedule.from_strings(
        getattr(settings, "WORK_START_TIME", DEFAULT_WORK_START_TIME),
        getattr(settings, "WORK_END_TIME", DEFAULT_WORK_END_TIME),
    )
    date_normalizer = DateNormalizer(getattr(settings, "DATE_FORMAT", DEFAULT_DATE_FORMAT))

    tz_name = getattr(settings, "TIMEZONE", "")
    tz = ZoneInfo(tz_name) if tz_name else None

    return Container(
        conn=conn,
        sections_repo=sections_repo,
        date_normalizer=date_normalizer,
        classifier=AttendanceClassifier(standard_schedule=schedule),
        training_date_resolver=TrainingDateResolver(date_normalizer, tz=tz),
        work_day_checker=WorkDayChecker(sections_repo),
    )
