from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of one student-day.

    Only PRESENT and ABSENT are ever stored; UNMARKED is the default of the
    reconciled report when no record exists.
    """

    PRESENT = "present"
    ABSENT = "absent"
    UNMARKED = "unmarked"

    @property
    def is_stored(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT)


class AttendanceLevel(str, Enum):
    """Colour band of an attendance percentage."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
