from __future__ import annotations

from datetime import date
from typing import Protocol

from .model import TimeClockRecord


class TimeClockRepository(Protocol):
    """Local store of daily worked time.

    Both operations are idempotent; the import never reads records back.
    """

    def delete_for_date(self, work_date: date) -> None:
        raise NotImplementedError

    def save(self, record: TimeClockRecord) -> None:
        raise NotImplementedError
