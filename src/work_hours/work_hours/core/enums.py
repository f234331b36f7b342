from __future__ import annotations

from enum import Enum


class CycleHalf(str, Enum):
    """Half of a calendar month used as a pay cycle."""

    FIRST = "FIRST"
    SECOND = "SECOND"

    @property
    def title(self) -> str:
        return "First" if self is CycleHalf.FIRST else "Second"

    @property
    def ordinal(self) -> str:
        return "1st" if self is CycleHalf.FIRST else "2nd"


class ChartMetric(str, Enum):
    HOURS = "hours"
    EARNINGS = "earnings"
