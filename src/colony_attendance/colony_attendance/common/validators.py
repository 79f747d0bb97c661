from __future__ import annotations

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no válido")
    return value.strip()


def require_positive(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} no válido") from exc
    if number <= 0:
        raise ValidationError(f"{field_name} debe ser mayor que 0")
    return number


def require_stored_status(value: AttendanceStatus | str) -> AttendanceStatus:
    """Accept only statuses that can be persisted (present/absent)."""
    try:
        status = AttendanceStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Estado de asistencia desconocido: {value!r}") from exc
    if not status.is_stored:
        raise ValidationError("Solo se puede guardar 'present' o 'absent'")
    return status
