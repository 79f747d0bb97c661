from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive
from ..core.exceptions import InvalidRangeError, PeriodNotFoundError, ValidationError
from .model import Period
from .repository import PeriodRepository

logger = logging.getLogger(__name__)


def _require_ordered(start_date: date, end_date: date) -> None:
    if start_date > end_date:
        raise InvalidRangeError(
            f"El período termina ({end_date.isoformat()}) antes de comenzar ({start_date.isoformat()})"
        )


class PeriodService:
    def __init__(self, periods: PeriodRepository):
        self._periods = periods

    def get(self, group_id: str, period_number: int) -> Period:
        period = self._periods.get_period(group_id, int(period_number))
        if not period:
            raise PeriodNotFoundError(group_id, int(period_number))
        return period

    def list_periods(self, group_id: str) -> Sequence[Period]:
        return self._periods.list_periods(require_non_empty(group_id, "Colonia"))

    def latest_period(self, group_id: str) -> Optional[Period]:
        """Default selection in the UI: the highest period number."""
        periods = self.list_periods(group_id)
        if not periods:
            return None
        return max(periods, key=lambda p: p.period_number)

    def create_period(self, *, group_id: str, start_date: date, end_date: date, season_label: str = "") -> Period:
        """Add the next period of a colony (max number + 1)."""

        group_id = require_non_empty(group_id, "Colonia")
        _require_ordered(start_date, end_date)

        latest = self.latest_period(group_id)
        number = latest.period_number + 1 if latest else 1
        season_label = (season_label or "").strip()

        self._periods.create_period(
            group_id=group_id,
            period_number=number,
            start_date=start_date,
            end_date=end_date,
            season_label=season_label,
        )
        logger.info("Created period %s for colony %s (%s..%s)", number, group_id, start_date, end_date)
        return Period(group_id, number, start_date, end_date, season_label)

    def replace_bounds(self, *, group_id: str, period_number: int, start_date: date, end_date: date) -> Period:
        period_number = require_positive(period_number, "Período")
        _require_ordered(start_date, end_date)
        current = self.get(group_id, period_number)

        if not self._periods.replace_bounds(
            group_id=group_id,
            period_number=period_number,
            start_date=start_date,
            end_date=end_date,
        ):
            raise ValidationError("No se pudo actualizar el período")
        return Period(group_id, period_number, start_date, end_date, current.season_label)

    def delete_period(self, *, group_id: str, period_number: int) -> None:
        period_number = require_positive(period_number, "Período")
        if not self._periods.delete_period(group_id=group_id, period_number=period_number):
            raise PeriodNotFoundError(group_id, period_number)
        logger.info("Deleted period %s of colony %s with its roster and attendance", period_number, group_id)

    @staticmethod
    def default_attendance_date(period: Period, today: date) -> date:
        """Today when it falls inside the period, otherwise the period start."""
        return today if period.contains(today) else period.start_date
