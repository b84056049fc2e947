from __future__ import annotations

from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import TimeClockRecord
from .repository import TimeClockRepository


class MySQLTimeClockRepository(TimeClockRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def delete_for_date(self, work_date: date) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_clock WHERE date=%s", (work_date,))

    def save(self, record: TimeClockRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_clock (date, user_id, time)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE time=VALUES(time)
                """,
                (record.date, record.user_id, record.time),
            )
