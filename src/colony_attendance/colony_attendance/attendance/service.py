from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.validators import require_non_empty, require_stored_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..periods.service import PeriodService
from ..reports.reconciler import reconcile
from ..students.repository import RosterRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Writes daily attendance for a colony period.

    Records are only written for dates inside the period and students of its
    roster; the report engine tolerates anything else but never creates it.
    """

    def __init__(self, attendance: AttendanceRepository, roster: RosterRepository, periods: PeriodService):
        self._attendance = attendance
        self._roster = roster
        self._periods = periods

    def _check_scope(self, group_id: str, period_number: int, day: date) -> set[str]:
        period = self._periods.get(group_id, period_number)
        if not period.contains(day):
            raise ValidationError(f"La fecha {day.isoformat()} está fuera del período {period_number}")
        return {s.student_id for s in self._roster.fetch_roster(group_id, period_number)}

    def mark(
        self,
        *,
        group_id: str,
        period_number: int,
        student_id: str,
        day: date,
        status: AttendanceStatus | str,
        marked_by: Optional[str] = None,
    ) -> None:
        group_id = require_non_empty(group_id, "Colonia")
        status = require_stored_status(status)
        if student_id not in self._check_scope(group_id, period_number, day):
            raise ValidationError("El estudiante no pertenece a este período")

        self._attendance.upsert_status(
            group_id=group_id,
            student_id=student_id,
            attendance_date=day,
            status=status,
            marked_by=marked_by,
        )

    def clear(self, *, group_id: str, period_number: int, student_id: str, day: date) -> bool:
        """Remove the stored status so the day reads as unmarked again."""
        self._check_scope(require_non_empty(group_id, "Colonia"), period_number, day)
        return self._attendance.delete_status(student_id=student_id, attendance_date=day)

    def day_sheet(self, *, group_id: str, period_number: int, day: date) -> dict[str, AttendanceStatus]:
        self._check_scope(group_id, period_number, day)
        roster = self._roster.fetch_roster(group_id, period_number)
        status_map = reconcile([day], roster, self._attendance.fetch_attendance(group_id, [day]))
        return {sid: status_map.status(sid, day) for sid in status_map}

    def mark_remaining_absent(
        self,
        *,
        group_id: str,
        period_number: int,
        day: date,
        marked_by: Optional[str] = None,
    ) -> int:
        """Mark every roster student still unmarked on ``day`` as absent.

        Returns the number of records written.
        """

        sheet = self.day_sheet(group_id=group_id, period_number=period_number, day=day)
        missing = [
            AttendanceRecord(group_id=group_id, student_id=sid, attendance_date=day, status=AttendanceStatus.ABSENT)
            for sid, status in sheet.items()
            if status == AttendanceStatus.UNMARKED
        ]
        if not missing:
            return 0

        written = self._attendance.upsert_many(missing, marked_by=marked_by)
        logger.info("Marked %s student(s) absent for colony %s on %s", written, group_id, day)
        return written
