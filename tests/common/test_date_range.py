from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.colony_attendance.colony_attendance.common.date_range import (
    day_label,
    generate_date_range,
    week_dates,
    week_start,
)
from src.colony_attendance.colony_attendance.core.exceptions import InvalidRangeError, ValidationError


@pytest.mark.parametrize(
    "start,end",
    [
        (date(2024, 8, 5), date(2024, 8, 9)),
        (date(2023, 12, 28), date(2024, 1, 3)),
        (date(2024, 2, 27), date(2024, 3, 2)),
        (date(2023, 2, 27), date(2023, 3, 2)),
        # DST changes (Europe, Americas) must not matter for pure dates
        (date(2024, 3, 8), date(2024, 3, 12)),
        (date(2024, 10, 25), date(2024, 11, 4)),
    ],
)
def test_range_is_closed_contiguous_and_increasing(start, end):
    days = generate_date_range(start, end)

    assert len(days) == (end - start).days + 1
    assert days[0] == start
    assert days[-1] == end
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def test_leap_day_is_included():
    days = generate_date_range(date(2024, 2, 28), date(2024, 3, 1))
    assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_single_day_range():
    d = date(2024, 8, 5)
    assert generate_date_range(d, d) == [d]


def test_start_after_end_raises():
    with pytest.raises(InvalidRangeError):
        generate_date_range(date(2024, 8, 9), date(2024, 8, 5))


def test_invalid_range_is_a_validation_error():
    assert issubclass(InvalidRangeError, ValidationError)


def test_weekdays_only_drops_weekend_boundaries():
    days = generate_date_range(date(2024, 8, 3), date(2024, 8, 11), weekdays_only=True)
    assert days == [date(2024, 8, d) for d in (5, 6, 7, 8, 9)]


def test_weekdays_only_single_weekend_day_is_empty():
    assert generate_date_range(date(2024, 8, 3), date(2024, 8, 3), weekdays_only=True) == []


def test_all_days_is_the_default():
    assert len(generate_date_range(date(2024, 8, 3), date(2024, 8, 11))) == 9


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2024, 8, 5), date(2024, 8, 5)),  # Monday
        (date(2024, 8, 8), date(2024, 8, 5)),  # Thursday
        (date(2024, 8, 11), date(2024, 8, 5)),  # Sunday -> previous Monday
        (date(2024, 9, 1), date(2024, 8, 26)),  # Sunday across a month boundary
    ],
)
def test_week_start(day, expected):
    assert week_start(day) == expected


def test_week_dates_are_monday_to_friday():
    assert week_dates(date(2024, 12, 30)) == [
        date(2024, 12, 30),
        date(2024, 12, 31),
        date(2025, 1, 1),
        date(2025, 1, 2),
        date(2025, 1, 3),
    ]


def test_day_label():
    assert day_label(date(2024, 8, 5)) == "lun 05/08"
    assert day_label(date(2024, 2, 29)) == "jue 29/02"
