from __future__ import annotations

import logging
from datetime import date

from ..core.exceptions import LookupContractError
from .repository import TrainingDayLookup

logger = logging.getLogger(__name__)


class WorkDayChecker:
    def __init__(self, sections: TrainingDayLookup):
        self._sections = sections

    def is_work_day(self, course_id: int, training_date: date) -> bool:
        count = self._sections.get_section_count(course_id, training_date)
        logger.debug("Section count course_id=%s date=%s count=%s", course_id, training_date, count)

        if count < 0:
            logger.error("Negative section count course_id=%s date=%s count=%s", course_id, training_date, count)
            raise LookupContractError(f"Section count must not be negative, got {count}")
        return count > 0
