from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import DateNormalizer, now_local
from ..core.exceptions import InternalConsistencyError

logger = logging.getLogger(__name__)


class TrainingDateResolver:
    """Resolve today's training date at date-only granularity."""

    def __init__(
        self,
        normalizer: DateNormalizer | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        tz: Optional[tzinfo] = None,
    ):
        self._normalizer = normalizer or DateNormalizer()
        self._clock = clock or (lambda: now_local(tz))
        self._tz = tz

    def _current_date(self) -> date:
        now = self._clock()
        # Aware clocks are moved into the configured zone before the time is dropped.
        if now.tzinfo is not None and self._tz is not None:
            now = now.astimezone(self._tz)
        return now.date()

    def today(self) -> date:
        current = self._current_date()
        text = self._normalizer.format(current)
        try:
            parsed = self._normalizer.parse(text)
        except ValueError as e:
            logger.error("Date round trip failed: pattern=%r text=%r", self._normalizer.pattern, text)
            raise InternalConsistencyError(f"Cannot re-parse formatted date {text!r}") from e

        if parsed != current:
            logger.error("Date round trip mismatch: %s -> %r -> %s", current, text, parsed)
            raise InternalConsistencyError(f"Formatted date {text!r} parsed back as {parsed}")
        return parsed
