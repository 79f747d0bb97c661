"""Date sequences for periods and attendance weeks.

All arithmetic is done on ``datetime.date`` (no time of day, no timezone),
so month/year boundaries and DST changes can neither skip nor repeat a day.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..core.exceptions import InvalidRangeError
from .datetime_utils import format_day_month
from .weekday import is_weekday, weekday, weekday_index

_ONE_DAY = timedelta(days=1)
_WORK_WEEK_DAYS = 5


def generate_date_range(start: date, end: date, *, weekdays_only: bool = False) -> list[date]:
    """Return every date of the closed interval ``[start, end]`` in order.

    With ``weekdays_only`` the sequence is filtered to Monday-Friday.
    Raises InvalidRangeError when ``start`` is after ``end``.
    """
    if start > end:
        raise InvalidRangeError(f"El período termina ({end.isoformat()}) antes de comenzar ({start.isoformat()})")

    total = (end - start).days + 1
    days = [start + timedelta(days=offset) for offset in range(total)]
    if weekdays_only:
        days = [d for d in days if is_weekday(d.day, d.month, d.year)]
    return days


def week_start(day: date) -> date:
    """Monday of the week containing ``day``; Sunday belongs to the week before."""
    return day - timedelta(days=weekday_index(day.day, day.month, day.year))


def week_dates(monday: date) -> list[date]:
    """Monday-Friday of the week starting at ``monday``."""
    start = week_start(monday)
    return [start + _ONE_DAY * i for i in range(_WORK_WEEK_DAYS)]


def day_label(day: date) -> str:
    """Column label such as ``lun 05/08``."""
    return f"{weekday(day.day, day.month, day.year)} {format_day_month(day)}"
