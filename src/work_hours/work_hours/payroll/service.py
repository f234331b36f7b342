from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import today_local
from ..core.exceptions import ValidationError
from ..entries.model import Entry
from ..settings.model import Settings
from ..users.repository import UserRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .cycle import PayCycle, cycle_for


@dataclass(frozen=True)
class CycleStats:
    total_hours: float
    remaining_hours: float
    earnings: float
    cycle_label: str

    def to_dict(self) -> dict:
        return {
            "totalHours": self.total_hours,
            "remainingHours": self.remaining_hours,
            "earnings": self.earnings,
            "cycleLabel": self.cycle_label,
        }


def cycle_entries(entries: Iterable[Entry], cycle: PayCycle) -> list[Entry]:
    return [e for e in entries if cycle.contains(e.work_date)]


def current_cycle_stats(
    entries: Iterable[Entry],
    settings: Settings,
    today: date,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> CycleStats:
    """Totals for the pay cycle containing ``today``.

    Always recomputed from its inputs; nothing here is cached or stored.
    """
    calculator = calculator or StandardPayrollCalculator()
    cycle = cycle_for(today)

    total_hours = sum(e.hours for e in cycle_entries(entries, cycle))
    return CycleStats(
        total_hours=total_hours,
        remaining_hours=max(0.0, settings.target_hours_per_cycle - total_hours),
        earnings=calculator.earnings(total_hours, settings),
        cycle_label=cycle.label,
    )


class PayrollReportService:
    def __init__(self, users: UserRepository, *, calculator: Optional[PayrollCalculator] = None):
        self._users = users
        self._calculator = calculator or StandardPayrollCalculator()

    @property
    def calculator(self) -> PayrollCalculator:
        return self._calculator

    def cycle_summary(self, username: str, *, today: Optional[date] = None) -> dict:
        user = self._users.get_by_username(username)
        if not user:
            raise ValidationError("User does not exist")

        today = today or today_local()
        cycle = cycle_for(today)
        stats = current_cycle_stats(user.entries, user.settings, today, calculator=self._calculator)

        summary = stats.to_dict()
        summary.update(
            {
                "cycleStart": cycle.start.strftime("%Y-%m-%d"),
                "cycleEnd": cycle.end.strftime("%Y-%m-%d"),
                "targetHoursPerCycle": user.settings.target_hours_per_cycle,
                "dailyHours": user.settings.daily_hours,
                "workingDays": user.settings.working_days,
            }
        )
        return summary
