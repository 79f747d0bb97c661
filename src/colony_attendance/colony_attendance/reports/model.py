from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Mapping

from ..core.enums import AttendanceLevel, AttendanceStatus
from ..periods.model import Period
from ..students.model import Student


@dataclass(frozen=True)
class DenseStatusMap:
    """Read-model: one status for every (student, date) of a report.

    ``rows`` keeps roster order; each row keeps date order. Never persisted,
    rebuilt on every report request.
    """

    dates: tuple[date, ...]
    rows: Mapping[str, Mapping[date, AttendanceStatus]] = field(default_factory=dict)

    def status(self, student_id: str, day: date) -> AttendanceStatus:
        return self.rows[student_id][day]

    def row(self, student_id: str) -> list[AttendanceStatus]:
        cells = self.rows[student_id]
        return [cells[d] for d in self.dates]

    @property
    def student_ids(self) -> list[str]:
        return list(self.rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class StudentSummary:
    student_id: str
    days_present: int
    total_days: int
    percentage: int
    level: AttendanceLevel


@dataclass(frozen=True)
class PeriodReport:
    """Everything a caller needs to render or export one period."""

    period: Period
    date_sequence: tuple[date, ...]
    roster: tuple[Student, ...]
    status_map: DenseStatusMap
    summaries: Mapping[str, StudentSummary]

    def summary_for(self, student_id: str) -> StudentSummary:
        return self.summaries[student_id]

    def student(self, student_id: str) -> Student:
        for s in self.roster:
            if s.student_id == student_id:
                return s
        raise KeyError(student_id)
