from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional

from ..core.constants import DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class DateNormalizer:
    """Format/parse a calendar date with one shared date-only pattern."""

    pattern: str = DEFAULT_DATE_FORMAT

    def format(self, value: date) -> str:
        if isinstance(value, datetime):
            value = value.date()
        return value.strftime(self.pattern)

    def parse(self, value: str) -> date:
        return datetime.strptime(value, self.pattern).date()


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current time, local unless a zone is given.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)
