from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, str]
TimeLike = Union[time, str]


def parse_iso_date(value: DateLike) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}")


def parse_clock_time(value: TimeLike) -> time:
    """Parse HH:MM string into time (seconds are dropped)."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    try:
        return datetime.strptime(str(value).strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time: {value!r}")


def minute_of_day(t: time) -> int:
    return t.hour * 60 + t.minute


def format_clock_time(t: time) -> str:
    return t.strftime("%H:%M")


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def now_millis() -> int:
    return int(datetime.now().timestamp() * 1000)
