from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class RosterRepository(Protocol):
    def fetch_roster(self, group_id: str, period_number: int) -> Sequence[Student]:
        """Students of a period ordered by display name.

        Returns an empty sequence (never raises) when the period has no students.
        """

        raise NotImplementedError
