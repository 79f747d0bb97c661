from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Fecha no válida: {value!r}") from exc


def today_local() -> date:
    """Current local calendar date."""
    return date.today()


def format_day_month(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}"


def format_display_date(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"
