from __future__ import annotations

from ..core.constants import HIGH_ATTENDANCE_PERCENT, MEDIUM_ATTENDANCE_PERCENT
from ..core.enums import AttendanceLevel, AttendanceStatus
from .model import DenseStatusMap, StudentSummary


def attendance_percentage(days_present: int, total_days: int) -> int:
    """Percentage rounded half-up; 0 for an empty period."""
    if total_days <= 0:
        return 0
    # floor(p / t * 100 + 0.5) in integer arithmetic
    return (200 * days_present + total_days) // (2 * total_days)


def attendance_level(percentage: int) -> AttendanceLevel:
    if percentage >= HIGH_ATTENDANCE_PERCENT:
        return AttendanceLevel.HIGH
    if percentage >= MEDIUM_ATTENDANCE_PERCENT:
        return AttendanceLevel.MEDIUM
    return AttendanceLevel.LOW


def summarize_row(student_id: str, statuses: list[AttendanceStatus]) -> StudentSummary:
    days_present = sum(1 for s in statuses if s == AttendanceStatus.PRESENT)
    total_days = len(statuses)
    percentage = attendance_percentage(days_present, total_days)
    return StudentSummary(
        student_id=student_id,
        days_present=days_present,
        total_days=total_days,
        percentage=percentage,
        level=attendance_level(percentage),
    )


def aggregate(status_map: DenseStatusMap) -> dict[str, StudentSummary]:
    """Per-student summaries, keyed by student_id in roster order."""
    return {sid: summarize_row(sid, status_map.row(sid)) for sid in status_map}
