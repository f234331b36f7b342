from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import last_day_of_month
from ..core.constants import FIRST_HALF_LAST_DAY, MONTH_NAMES
from ..core.enums import CycleHalf


def half_of(day: date) -> CycleHalf:
    return CycleHalf.FIRST if day.day <= FIRST_HALF_LAST_DAY else CycleHalf.SECOND


def cycle_label(day: date) -> str:
    """E.g. "First half of March 2024"."""
    return f"{half_of(day).title} half of {MONTH_NAMES[day.month - 1]} {day.year}"


@dataclass(frozen=True)
class PayCycle:
    """Half-month pay cycle, both ends inclusive."""

    start: date
    end: date
    half: CycleHalf
    label: str

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def cycle_for(today: date) -> PayCycle:
    half = half_of(today)
    if half is CycleHalf.FIRST:
        start, end = 1, FIRST_HALF_LAST_DAY
    else:
        start, end = FIRST_HALF_LAST_DAY + 1, last_day_of_month(today.year, today.month)

    return PayCycle(
        start=today.replace(day=start),
        end=today.replace(day=end),
        half=half,
        label=cycle_label(today),
    )
