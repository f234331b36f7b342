from __future__ import annotations

from datetime import date, time

from work_hours.charts.aggregation import aggregate_earnings, aggregate_hours, period_label
from work_hours.entries.model import Entry
from work_hours.settings.model import Settings


def _entry(entry_id: int, day: date, hours: float) -> Entry:
    return Entry(entry_id=entry_id, work_date=day, clock_in=time(9), clock_out=time(17), hours=hours)


def test_period_label():
    assert period_label(date(2024, 1, 15)) == "1st half of Jan"
    assert period_label(date(2024, 1, 16)) == "2nd half of Jan"
    assert period_label(date(2024, 9, 30)) == "2nd half of Sep"


def test_same_day_entries_merge():
    entries = [_entry(1, date(2024, 1, 5), 3), _entry(2, date(2024, 1, 5), 2)]

    assert aggregate_hours(entries) == [{"period": "1st half of Jan", "hours": 5}]


def test_groups_sorted_by_month_then_half():
    entries = [
        _entry(1, date(2024, 3, 20), 1),
        _entry(2, date(2024, 1, 20), 2),
        _entry(3, date(2024, 3, 2), 3),
        _entry(4, date(2024, 1, 2), 4),
    ]

    assert [p["period"] for p in aggregate_hours(entries)] == [
        "1st half of Jan",
        "2nd half of Jan",
        "1st half of Mar",
        "2nd half of Mar",
    ]


def test_only_last_six_periods_kept():
    entries = [_entry(m, date(2024, m, 1), m) for m in range(1, 9)]

    periods = aggregate_hours(entries)

    assert [p["period"] for p in periods] == [
        "1st half of Mar",
        "1st half of Apr",
        "1st half of May",
        "1st half of Jun",
        "1st half of Jul",
        "1st half of Aug",
    ]


def test_same_half_month_from_different_years_merges():
    # Labels carry no year: January 2023 and January 2024 land in one group.
    entries = [_entry(1, date(2023, 1, 3), 4), _entry(2, date(2024, 1, 10), 6)]

    assert aggregate_hours(entries) == [{"period": "1st half of Jan", "hours": 10}]


def test_december_of_last_year_sorts_after_this_january():
    entries = [_entry(1, date(2023, 12, 20), 1), _entry(2, date(2024, 1, 5), 1)]

    assert [p["period"] for p in aggregate_hours(entries)] == ["1st half of Jan", "2nd half of Dec"]


def test_earnings_use_rate_at_aggregation_time():
    entries = [_entry(1, date(2024, 2, 3), 4), _entry(2, date(2024, 2, 20), 2)]

    assert aggregate_earnings(entries, Settings(hourly_rate=10)) == [
        {"period": "1st half of Feb", "earnings": 40},
        {"period": "2nd half of Feb", "earnings": 20},
    ]
    assert aggregate_earnings(entries, Settings(hourly_rate=12.5))[0]["earnings"] == 50


def test_no_entries_no_periods():
    assert aggregate_hours([]) == []
    assert aggregate_earnings([], Settings()) == []
