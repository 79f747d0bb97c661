from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Period:
    """Inclusive date interval owned by a colony, numbered per colony."""

    group_id: str
    period_number: int
    start_date: date
    end_date: date
    season_label: str = ""

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
