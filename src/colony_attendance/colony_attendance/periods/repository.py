from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Period


class PeriodRepository(Protocol):
    def get_period(self, group_id: str, period_number: int) -> Optional[Period]:
        raise NotImplementedError

    def list_periods(self, group_id: str) -> Sequence[Period]:
        """Periods of a colony ordered by period_number."""

        raise NotImplementedError

    def create_period(self, *, group_id: str, period_number: int, start_date: date, end_date: date, season_label: str) -> None:
        raise NotImplementedError

    def replace_bounds(self, *, group_id: str, period_number: int, start_date: date, end_date: date) -> bool:
        """Replace both bounds in one statement."""

        raise NotImplementedError

    def delete_period(self, *, group_id: str, period_number: int) -> bool:
        """Delete the period together with its roster and attendance records."""

        raise NotImplementedError
