from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.colony_attendance.colony_attendance.attendance.model import AttendanceRecord
from src.colony_attendance.colony_attendance.container import wire
from src.colony_attendance.colony_attendance.core.enums import AttendanceStatus
from src.colony_attendance.colony_attendance.periods.model import Period
from src.colony_attendance.colony_attendance.students.model import Student

GROUP = "col-1"


class InMemoryPeriods:
    def __init__(self, periods=()):
        self._by_key: dict[tuple[str, int], Period] = {(p.group_id, p.period_number): p for p in periods}
        self.deleted: list[tuple[str, int]] = []

    def get_period(self, group_id: str, period_number: int) -> Optional[Period]:
        return self._by_key.get((group_id, int(period_number)))

    def list_periods(self, group_id: str):
        items = [p for p in self._by_key.values() if p.group_id == group_id]
        return sorted(items, key=lambda p: p.period_number)

    def create_period(self, *, group_id, period_number, start_date, end_date, season_label):
        self._by_key[(group_id, int(period_number))] = Period(group_id, int(period_number), start_date, end_date, season_label)

    def replace_bounds(self, *, group_id, period_number, start_date, end_date) -> bool:
        current = self._by_key.get((group_id, int(period_number)))
        if not current:
            return False
        self._by_key[(group_id, int(period_number))] = Period(
            group_id, int(period_number), start_date, end_date, current.season_label
        )
        return True

    def delete_period(self, *, group_id, period_number) -> bool:
        self.deleted.append((group_id, int(period_number)))
        return self._by_key.pop((group_id, int(period_number)), None) is not None


class InMemoryRoster:
    def __init__(self, rosters=None):
        self._rosters: dict[tuple[str, int], list[Student]] = dict(rosters or {})

    def fetch_roster(self, group_id: str, period_number: int):
        return list(self._rosters.get((group_id, int(period_number)), []))


class InMemoryAttendance:
    def __init__(self, records=()):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self.fetch_calls: list[tuple[str, list[date]]] = []
        for r in records:
            self._by_key[(r.student_id, r.attendance_date)] = r

    def fetch_attendance(self, group_id: str, dates):
        wanted = set(dates)
        self.fetch_calls.append((group_id, list(dates)))
        return [r for r in self._by_key.values() if r.group_id == group_id and r.attendance_date in wanted]

    def upsert_status(self, *, group_id, student_id, attendance_date, status, marked_by=None) -> None:
        self._by_key[(student_id, attendance_date)] = AttendanceRecord(group_id, student_id, attendance_date, status)

    def upsert_many(self, records, *, marked_by=None) -> int:
        count = 0
        for r in records:
            self.upsert_status(
                group_id=r.group_id,
                student_id=r.student_id,
                attendance_date=r.attendance_date,
                status=r.status,
                marked_by=marked_by,
            )
            count += 1
        return count

    def delete_status(self, *, student_id, attendance_date) -> bool:
        return self._by_key.pop((student_id, attendance_date), None) is not None

    def get(self, student_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((student_id, attendance_date))


@pytest.fixture
def august_period():
    return Period(GROUP, 1, date(2024, 8, 5), date(2024, 8, 9), "Verano 2024")


@pytest.fixture
def roster():
    return [
        Student("s1", "Pérez, Ana", "A-001"),
        Student("s2", "Gómez, Luis", None),
    ]


@pytest.fixture
def repos(august_period, roster):
    periods = InMemoryPeriods([august_period])
    rosters = InMemoryRoster({(GROUP, 1): roster})
    attendance = InMemoryAttendance(
        [
            AttendanceRecord(GROUP, "s1", date(2024, 8, 6), AttendanceStatus.PRESENT),
            AttendanceRecord(GROUP, "s2", date(2024, 8, 5), AttendanceStatus.ABSENT),
        ]
    )
    return periods, rosters, attendance


@pytest.fixture
def container(repos):
    periods, rosters, attendance = repos
    return wire(periods_repo=periods, roster_repo=rosters, attendance_repo=attendance)
