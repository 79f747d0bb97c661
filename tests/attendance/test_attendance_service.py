from __future__ import annotations

from datetime import date

import pytest

from src.colony_attendance.colony_attendance.core.enums import AttendanceStatus
from src.colony_attendance.colony_attendance.core.exceptions import PeriodNotFoundError, ValidationError

from conftest import GROUP


def test_mark_then_remark_replaces_status(container, repos):
    _, _, attendance = repos
    svc = container.attendance_service

    svc.mark(group_id=GROUP, period_number=1, student_id="s1", day=date(2024, 8, 7), status="present")
    svc.mark(group_id=GROUP, period_number=1, student_id="s1", day=date(2024, 8, 7), status=AttendanceStatus.ABSENT)

    assert attendance.get("s1", date(2024, 8, 7)).status == AttendanceStatus.ABSENT
    report = container.report_service.build_report(GROUP, 1)
    assert report.status_map.status("s1", date(2024, 8, 7)) == AttendanceStatus.ABSENT


@pytest.mark.parametrize("status", ["unmarked", "late", ""])
def test_mark_rejects_non_stored_status(container, status):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(
            group_id=GROUP, period_number=1, student_id="s1", day=date(2024, 8, 7), status=status
        )


def test_mark_rejects_date_outside_period(container):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(
            group_id=GROUP, period_number=1, student_id="s1", day=date(2024, 8, 10), status="present"
        )


def test_mark_rejects_student_outside_roster(container):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(
            group_id=GROUP, period_number=1, student_id="other", day=date(2024, 8, 7), status="present"
        )


def test_mark_unknown_period(container):
    with pytest.raises(PeriodNotFoundError):
        container.attendance_service.mark(
            group_id=GROUP, period_number=9, student_id="s1", day=date(2024, 8, 7), status="present"
        )


def test_clear_makes_day_unmarked_again(container):
    svc = container.attendance_service

    assert svc.clear(group_id=GROUP, period_number=1, student_id="s1", day=date(2024, 8, 6)) is True
    sheet = svc.day_sheet(group_id=GROUP, period_number=1, day=date(2024, 8, 6))
    assert sheet["s1"] == AttendanceStatus.UNMARKED


def test_day_sheet_covers_whole_roster(container):
    sheet = container.attendance_service.day_sheet(group_id=GROUP, period_number=1, day=date(2024, 8, 5))
    assert sheet == {"s1": AttendanceStatus.UNMARKED, "s2": AttendanceStatus.ABSENT}


def test_mark_remaining_absent_only_touches_unmarked(container, repos):
    _, _, attendance = repos
    svc = container.attendance_service

    written = svc.mark_remaining_absent(group_id=GROUP, period_number=1, day=date(2024, 8, 6), marked_by="u1")

    assert written == 1
    assert attendance.get("s1", date(2024, 8, 6)).status == AttendanceStatus.PRESENT
    assert attendance.get("s2", date(2024, 8, 6)).status == AttendanceStatus.ABSENT
    assert svc.mark_remaining_absent(group_id=GROUP, period_number=1, day=date(2024, 8, 6)) == 0
