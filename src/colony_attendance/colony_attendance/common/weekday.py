"""Day-of-week calculation on plain (day, month, year) integers.

Uses Zeller's congruence on the proleptic Gregorian calendar, so the result
never depends on the process locale or timezone.
"""

from __future__ import annotations

from ..core.exceptions import ValidationError

# Zeller's h: 0 = Saturday, 1 = Sunday, ..., 6 = Friday
_ZELLER_ABBREVIATIONS = ("sáb", "dom", "lun", "mar", "mié", "jue", "vie")

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _validate(day: int, month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise ValidationError(f"Mes no válido: {month}")
    if not 1 <= day <= days_in_month(month, year):
        raise ValidationError(f"Día no válido: {day:02d}/{month:02d}/{year}")


def _zeller(day: int, month: int, year: int) -> int:
    _validate(day, month, year)
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    return (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7


def weekday_index(day: int, month: int, year: int) -> int:
    """Return 0 for Monday through 6 for Sunday (same numbering as ``date.weekday``)."""
    return (_zeller(day, month, year) + 5) % 7


def weekday(day: int, month: int, year: int) -> str:
    """Spanish short weekday name used in report headers (``lun`` ... ``dom``)."""
    return _ZELLER_ABBREVIATIONS[_zeller(day, month, year)]


def weekday_name(day: int, month: int, year: int) -> str:
    return WEEKDAY_NAMES[weekday_index(day, month, year)]


def is_weekday(day: int, month: int, year: int) -> bool:
    return weekday_index(day, month, year) < 5
