from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_roster(self, group_id: str, period_number: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, student_id
                FROM students
                WHERE colony_id=%s AND period_number=%s
                ORDER BY name ASC, id ASC
                """,
                (group_id, int(period_number)),
            )
            return [
                Student(
                    student_id=str(r["id"]),
                    display_name=r["name"],
                    external_id=r.get("student_id") or None,
                )
                for r in fetchall(cur)
            ]
