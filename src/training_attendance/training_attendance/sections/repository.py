from __future__ import annotations

from datetime import date
from typing import Protocol


class TrainingDayLookup(Protocol):
    def get_section_count(self, course_id: int, training_date: date) -> int:
        """Number of scheduled sections for the course on that date (0 if none)."""

        raise NotImplementedError
