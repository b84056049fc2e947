from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeDirectory


class MySQLUserRepository(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_eligible(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, cpf
                FROM users
                WHERE is_active=1 AND cpf IS NOT NULL AND TRIM(cpf) <> ''
                ORDER BY user_id
                """
            )
            rows = fetchall(cur)
            return [
                Employee(
                    user_id=int(r["user_id"]),
                    full_name=str(r["full_name"]),
                    cpf=str(r["cpf"]).strip(),
                )
                for r in rows
            ]
