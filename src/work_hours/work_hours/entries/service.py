from __future__ import annotations

import io
from dataclasses import replace
from datetime import time
from typing import Callable, Optional

import pandas as pd

from ..common.datetime_utils import (
    DateLike,
    TimeLike,
    minute_of_day,
    now_millis,
    parse_clock_time,
    parse_iso_date,
)
from ..common.logger import get_logger
from ..common.validators import require_present
from ..core.exceptions import InvalidRangeError, ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Entry

logger = get_logger(__name__)


def calculate_hours(clock_in: time, clock_out: time) -> float:
    """Same-day duration in hours; clock-out before clock-in gives a negative value."""
    return (minute_of_day(clock_out) - minute_of_day(clock_in)) / 60


def sorted_newest_first(entries) -> list[Entry]:
    return sorted(entries, key=lambda e: e.work_date, reverse=True)


class EntryService:
    def __init__(self, users: UserRepository, *, clock_millis: Optional[Callable[[], int]] = None):
        self._users = users
        self._clock_millis = clock_millis or now_millis

    def _get_user(self, username: str) -> User:
        user = self._users.get_by_username(username)
        if not user:
            raise ValidationError("User does not exist")
        return user

    def _next_id(self, entries: tuple[Entry, ...]) -> int:
        candidate = int(self._clock_millis())
        if entries:
            candidate = max(candidate, max(e.entry_id for e in entries) + 1)
        return candidate

    def add_entry(
        self,
        username: str,
        work_date: Optional[DateLike],
        clock_in: Optional[TimeLike],
        clock_out: Optional[TimeLike],
    ) -> Entry:
        require_present(work_date, "Date")
        require_present(clock_in, "Clock in")
        require_present(clock_out, "Clock out")

        day = parse_iso_date(work_date)
        t_in = parse_clock_time(clock_in)
        t_out = parse_clock_time(clock_out)

        hours = calculate_hours(t_in, t_out)
        if hours <= 0:
            raise InvalidRangeError("Clock Out time must be after Clock In time")

        user = self._get_user(username)
        entry = Entry(entry_id=self._next_id(user.entries), work_date=day, clock_in=t_in, clock_out=t_out, hours=hours)
        self._users.update(replace(user, entries=user.entries + (entry,)))
        logger.info("Added entry %s for %s (%.2f h)", entry.entry_id, username, hours)
        return entry

    def remove_entry(self, username: str, entry_id: int) -> None:
        user = self._get_user(username)
        remaining = tuple(e for e in user.entries if e.entry_id != int(entry_id))
        if len(remaining) != len(user.entries):
            self._users.update(replace(user, entries=remaining))

    def list_entries(self, username: str) -> list[Entry]:
        return sorted_newest_first(self._get_user(username).entries)

    def export_entries(self, username: str) -> bytes:
        """Excel workbook of the entries table, newest first."""
        rows = [
            (e.work_date, e.clock_in.strftime("%H:%M"), e.clock_out.strftime("%H:%M"), round(e.hours, 2))
            for e in self.list_entries(username)
        ]
        df = pd.DataFrame(rows, columns=["Date", "Clock In", "Clock Out", "Hours"])

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Entries")
        return out.getvalue()
