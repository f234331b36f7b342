from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any

from ..common.datetime_utils import format_clock_time, parse_clock_time, parse_iso_date


@dataclass(frozen=True)
class Entry:
    """One worked day: clock-in/clock-out on a calendar date."""

    entry_id: int
    work_date: date
    clock_in: time
    clock_out: time
    hours: float

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "clockIn": format_clock_time(self.clock_in),
            "clockOut": format_clock_time(self.clock_out),
            "hours": self.hours,
            "id": self.entry_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        if not isinstance(data, dict):
            raise ValueError("entry is not an object")
        return cls(
            entry_id=int(data["id"]),
            work_date=parse_iso_date(data["date"]),
            clock_in=parse_clock_time(data["clockIn"]),
            clock_out=parse_clock_time(data["clockOut"]),
            hours=float(data["hours"]),
        )
