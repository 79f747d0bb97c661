from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def fetch_attendance(self, group_id: str, dates: Sequence[date]) -> Sequence[AttendanceRecord]:
        """Records of a colony restricted to ``dates``.

        May contain students outside any given roster.
        """

        raise NotImplementedError

    def upsert_status(
        self,
        *,
        group_id: str,
        student_id: str,
        attendance_date: date,
        status: AttendanceStatus,
        marked_by: Optional[str] = None,
    ) -> None:
        """Write the status, replacing any previous one for (student, date)."""

        raise NotImplementedError

    def upsert_many(self, records: Iterable[AttendanceRecord], *, marked_by: Optional[str] = None) -> int:
        raise NotImplementedError

    def delete_status(self, *, student_id: str, attendance_date: date) -> bool:
        raise NotImplementedError
