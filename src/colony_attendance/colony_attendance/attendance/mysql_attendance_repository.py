from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, placeholders
from .model import AttendanceRecord
from .repository import AttendanceRepository

_UPSERT_SQL = """
    INSERT INTO colony_attendance(colony_id, student_id, date, status, marked_by)
    VALUES(%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE colony_id=VALUES(colony_id), status=VALUES(status), marked_by=VALUES(marked_by)
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_attendance(self, group_id: str, dates: Sequence[date]) -> Sequence[AttendanceRecord]:
        if not dates:
            return []

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT colony_id, student_id, date, status
                FROM colony_attendance
                WHERE colony_id=%s AND date IN ({placeholders(dates)})
                ORDER BY date ASC, updated_at ASC
                """,
                (group_id, *dates),
            )
            return [
                AttendanceRecord(
                    group_id=str(r["colony_id"]),
                    student_id=str(r["student_id"]),
                    attendance_date=normalize_mysql_date(r["date"]),
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def upsert_status(
        self,
        *,
        group_id: str,
        student_id: str,
        attendance_date: date,
        status: AttendanceStatus,
        marked_by: Optional[str] = None,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT_SQL, (group_id, student_id, attendance_date, status.value, marked_by))

    def upsert_many(self, records: Iterable[AttendanceRecord], *, marked_by: Optional[str] = None) -> int:
        params = [
            (r.group_id, r.student_id, r.attendance_date, AttendanceStatus(r.status).value, marked_by)
            for r in records
        ]
        if not params:
            return 0

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_UPSERT_SQL, params)
        return len(params)

    def delete_status(self, *, student_id: str, attendance_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM colony_attendance WHERE student_id=%s AND date=%s",
                (student_id, attendance_date),
            )
            return cur.rowcount > 0
