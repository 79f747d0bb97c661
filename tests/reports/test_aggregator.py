from __future__ import annotations

from datetime import date

import pytest

from src.colony_attendance.colony_attendance.attendance.model import AttendanceRecord
from src.colony_attendance.colony_attendance.common.date_range import generate_date_range
from src.colony_attendance.colony_attendance.core.enums import AttendanceLevel, AttendanceStatus
from src.colony_attendance.colony_attendance.reports.aggregator import (
    aggregate,
    attendance_level,
    attendance_percentage,
)
from src.colony_attendance.colony_attendance.reports.reconciler import reconcile

DATES = generate_date_range(date(2024, 8, 5), date(2024, 8, 9))


def test_all_unmarked_gives_zero():
    summaries = aggregate(reconcile(DATES, ["s1", "s2"], []))

    for summary in summaries.values():
        assert summary.days_present == 0
        assert summary.total_days == 5
        assert summary.percentage == 0
        assert summary.level == AttendanceLevel.LOW


def test_empty_period_gives_zero_percentage():
    summaries = aggregate(reconcile([], ["s1"], []))

    assert summaries["s1"].total_days == 0
    assert summaries["s1"].percentage == 0


def test_absent_and_unmarked_do_not_count():
    records = [
        AttendanceRecord("col-1", "s1", date(2024, 8, 5), AttendanceStatus.PRESENT),
        AttendanceRecord("col-1", "s1", date(2024, 8, 6), AttendanceStatus.ABSENT),
        AttendanceRecord("col-1", "s1", date(2024, 8, 7), AttendanceStatus.PRESENT),
    ]
    summary = aggregate(reconcile(DATES, ["s1"], records))["s1"]

    assert summary.days_present == 2
    assert summary.total_days == 5
    assert summary.percentage == 40


def test_scenario_one_of_five_is_twenty_percent():
    record = AttendanceRecord("col-1", "s1", date(2024, 8, 6), AttendanceStatus.PRESENT)
    summary = aggregate(reconcile(DATES, ["s1"], [record]))["s1"]

    assert (summary.days_present, summary.total_days, summary.percentage) == (1, 5, 20)


def test_summaries_follow_roster_order():
    summaries = aggregate(reconcile(DATES, ["b", "a", "c"], []))
    assert list(summaries) == ["b", "a", "c"]


@pytest.mark.parametrize(
    "present,total,expected",
    [
        (0, 0, 0),
        (0, 7, 0),
        (7, 7, 100),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),  # 12.5 rounds half-up
        (5, 8, 63),  # 62.5 rounds half-up
        (1, 200, 1),  # 0.5 rounds half-up
    ],
)
def test_percentage_rounding(present, total, expected):
    assert attendance_percentage(present, total) == expected


@pytest.mark.parametrize(
    "percentage,level",
    [(100, AttendanceLevel.HIGH), (80, AttendanceLevel.HIGH), (79, AttendanceLevel.MEDIUM), (60, AttendanceLevel.MEDIUM), (59, AttendanceLevel.LOW)],
)
def test_attendance_level_bands(percentage, level):
    assert attendance_level(percentage) == level
