from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Stored fact: one status for one student on one date."""

    group_id: str
    student_id: str
    attendance_date: date
    status: AttendanceStatus
