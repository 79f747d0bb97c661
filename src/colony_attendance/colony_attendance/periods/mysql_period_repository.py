from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Period
from .repository import PeriodRepository

_COLUMNS = "colony_id, period_number, periodo_desde, periodo_hasta, season_desc"


def _to_period(r: dict) -> Period:
    return Period(
        group_id=str(r["colony_id"]),
        period_number=int(r["period_number"]),
        start_date=normalize_mysql_date(r["periodo_desde"]),
        end_date=normalize_mysql_date(r["periodo_hasta"]),
        season_label=r.get("season_desc") or "",
    )


class MySQLPeriodRepository(PeriodRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_period(self, group_id: str, period_number: int) -> Optional[Period]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM colony_periods WHERE colony_id=%s AND period_number=%s",
                (group_id, int(period_number)),
            )
            r = fetchone(cur)
            return _to_period(r) if r else None

    def list_periods(self, group_id: str) -> Sequence[Period]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM colony_periods WHERE colony_id=%s ORDER BY period_number ASC",
                (group_id,),
            )
            return [_to_period(r) for r in fetchall(cur)]

    def create_period(self, *, group_id: str, period_number: int, start_date: date, end_date: date, season_label: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO colony_periods(colony_id, period_number, periodo_desde, periodo_hasta, season_desc)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (group_id, int(period_number), start_date, end_date, season_label),
            )

    def replace_bounds(self, *, group_id: str, period_number: int, start_date: date, end_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE colony_periods
                SET periodo_desde=%s, periodo_hasta=%s
                WHERE colony_id=%s AND period_number=%s
                """,
                (start_date, end_date, group_id, int(period_number)),
            )
            return cur.rowcount > 0

    def delete_period(self, *, group_id: str, period_number: int) -> bool:
        # Single transaction: attendance, roster, then the period itself.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE a FROM colony_attendance a
                JOIN students s ON s.id = a.student_id
                WHERE s.colony_id=%s AND s.period_number=%s
                """,
                (group_id, int(period_number)),
            )
            cur.execute(
                "DELETE FROM students WHERE colony_id=%s AND period_number=%s",
                (group_id, int(period_number)),
            )
            cur.execute(
                "DELETE FROM colony_periods WHERE colony_id=%s AND period_number=%s",
                (group_id, int(period_number)),
            )
            return cur.rowcount > 0
