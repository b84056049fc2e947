from __future__ import annotations

import logging
import math
from datetime import date

from ..common.datetime_utils import leading_date, seconds_to_time
from ..core.exceptions import ParsingError
from .model import FolhaPontoResponse

logger = logging.getLogger(__name__)


class ResponseIndexer:
    """Turns a folhaPonto response into per-day worked time."""

    def index(self, response: FolhaPontoResponse) -> dict[date, float]:
        """Map each day of the response to its ``htr`` (worked minutes).

        The day comes from the leading date of ``data``; time and timezone
        suffixes are ignored. When a day appears more than once the first
        entry wins. Entries with an unreadable date, or an ``htr`` that is
        absent, negative or not finite, are left out, so the day shows up as missing.
        """
        index: dict[date, float] = {}
        for day in response.days:
            try:
                key = leading_date(day.data)
            except ValueError:
                logger.warning("Ignoring itens entry with unreadable date %r", day.data)
                continue
            if day.htr is None:
                continue
            if not math.isfinite(day.htr) or day.htr < 0:
                logger.warning("Ignoring itens entry for %s with htr=%r", key, day.htr)
                continue
            if key in index:
                continue
            index[key] = day.htr
        return index

    def duration_for_day(self, index: dict[date, float], day: date) -> str:
        if day not in index:
            raise ParsingError(f"No attendance data returned for date {day:%Y-%m-%d}")
        return seconds_to_time(index[day] * 60)
