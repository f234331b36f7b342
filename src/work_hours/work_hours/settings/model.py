from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..core.constants import DEFAULT_DAILY_HOURS, DEFAULT_HOURLY_RATE, DEFAULT_WORKING_DAYS


@dataclass(frozen=True)
class Settings:
    """Per-user pay settings.

    ``target_hours_per_cycle`` is stored, not derived on read: editing
    ``daily_hours`` or ``working_days`` recomputes it, while a direct override
    is kept until one of those two changes again.
    """

    hourly_rate: float = DEFAULT_HOURLY_RATE
    daily_hours: float = DEFAULT_DAILY_HOURS
    working_days: int = DEFAULT_WORKING_DAYS
    target_hours_per_cycle: float = DEFAULT_DAILY_HOURS * DEFAULT_WORKING_DAYS

    def with_hourly_rate(self, hourly_rate: float) -> "Settings":
        return replace(self, hourly_rate=hourly_rate)

    def with_daily_hours(self, daily_hours: float) -> "Settings":
        return replace(self, daily_hours=daily_hours, target_hours_per_cycle=daily_hours * self.working_days)

    def with_working_days(self, working_days: int) -> "Settings":
        return replace(self, working_days=working_days, target_hours_per_cycle=self.daily_hours * working_days)

    def with_target_hours(self, target_hours_per_cycle: float) -> "Settings":
        return replace(self, target_hours_per_cycle=target_hours_per_cycle)

    def to_dict(self) -> dict:
        return {
            "hourlyRate": self.hourly_rate,
            "dailyHours": self.daily_hours,
            "workingDays": self.working_days,
            "targetHoursPerCycle": self.target_hours_per_cycle,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Settings":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("settings is not an object")
        defaults = cls()
        daily_hours = float(data.get("dailyHours", defaults.daily_hours))
        working_days = int(data.get("workingDays", defaults.working_days))
        return cls(
            hourly_rate=float(data.get("hourlyRate", defaults.hourly_rate)),
            daily_hours=daily_hours,
            working_days=working_days,
            target_hours_per_cycle=float(data.get("targetHoursPerCycle", daily_hours * working_days)),
        )
