"""Half-month chart series.

Entries are grouped by "<1st|2nd> half of <Mon>" labels. The label carries no
year, so the same half-month from different years lands in one group; the
series are ordered by month within a fixed reference year and trimmed to the
most recent periods.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from ..core.constants import CHART_PERIOD_LIMIT, CHART_REFERENCE_YEAR, MONTH_ABBREVIATIONS
from ..core.enums import ChartMetric, CycleHalf
from ..entries.model import Entry
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..payroll.cycle import half_of
from ..settings.model import Settings

PeriodKey = tuple[int, CycleHalf]


def period_key(day: date) -> PeriodKey:
    return day.month, half_of(day)


def period_label(day: date) -> str:
    """E.g. "1st half of Jan"."""
    return _label(period_key(day))


def _label(key: PeriodKey) -> str:
    month, half = key
    return f"{half.ordinal} half of {MONTH_ABBREVIATIONS[month - 1]}"


def _sort_key(key: PeriodKey) -> tuple[date, int]:
    month, half = key
    return date(CHART_REFERENCE_YEAR, month, 1), 0 if half is CycleHalf.FIRST else 1


def _aggregate(
    entries: Iterable[Entry],
    metric: ChartMetric,
    value_of: Callable[[Entry], float],
    limit: int,
) -> list[dict]:
    totals: dict[PeriodKey, float] = {}
    for entry in entries:
        key = period_key(entry.work_date)
        totals[key] = totals.get(key, 0.0) + value_of(entry)

    ordered = sorted(totals, key=_sort_key)
    if limit > 0:
        ordered = ordered[-limit:]
    return [{"period": _label(k), metric.value: totals[k]} for k in ordered]


def aggregate_hours(entries: Iterable[Entry], *, limit: int = CHART_PERIOD_LIMIT) -> list[dict]:
    return _aggregate(entries, ChartMetric.HOURS, lambda e: e.hours, limit)


def aggregate_earnings(
    entries: Iterable[Entry],
    settings: Settings,
    *,
    calculator: Optional[PayrollCalculator] = None,
    limit: int = CHART_PERIOD_LIMIT,
) -> list[dict]:
    """Earnings per period at the *current* hourly rate."""
    calculator = calculator or StandardPayrollCalculator()
    return _aggregate(entries, ChartMetric.EARNINGS, lambda e: calculator.earnings(e.hours, settings), limit)
