from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import DenseStatusMap

logger = logging.getLogger(__name__)

RosterEntry = Union[Student, str]


def _student_id(entry: RosterEntry) -> str:
    return entry.student_id if isinstance(entry, Student) else str(entry)


def reconcile(
    date_sequence: Sequence[date],
    roster: Iterable[RosterEntry],
    stored_records: Iterable[AttendanceRecord],
) -> DenseStatusMap:
    """Build the dense (student x date) status map of a report.

    Every cell starts as UNMARKED and is overwritten by the stored record for
    that (student, date), the last record winning on duplicates. Records for
    students outside ``roster`` or dates outside ``date_sequence`` are
    skipped and logged; they are leftovers (e.g. students re-imported into
    another period) and must not break the report.
    """

    dates = tuple(date_sequence)
    rows: dict[str, dict[date, AttendanceStatus]] = {}
    for entry in roster:
        rows[_student_id(entry)] = {d: AttendanceStatus.UNMARKED for d in dates}

    ignored = 0
    for record in stored_records:
        cells = rows.get(record.student_id)
        if cells is None or record.attendance_date not in cells:
            ignored += 1
            logger.debug(
                "Ignoring attendance record outside report scope: student=%s date=%s status=%s",
                record.student_id,
                record.attendance_date,
                record.status,
            )
            continue
        cells[record.attendance_date] = AttendanceStatus(record.status)

    if ignored:
        logger.warning("Ignored %s attendance record(s) outside roster or date range", ignored)

    return DenseStatusMap(dates=dates, rows=rows)
