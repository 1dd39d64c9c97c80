"""Unit tests for trip_planner.utils."""

from datetime import date, timedelta

import pytest

from trip_planner.utils import coerce_days, derive_trip_dates, format_currency, format_display_date


def test_derive_trip_dates_consecutive():
    assert derive_trip_dates("2024-03-01", 3) == ["2024-03-01", "2024-03-02", "2024-03-03"]


def test_derive_trip_dates_crosses_month_and_year():
    assert derive_trip_dates("2024-01-30", 3) == ["2024-01-30", "2024-01-31", "2024-02-01"]
    assert derive_trip_dates("2024-12-31", 2) == ["2024-12-31", "2025-01-01"]
    assert derive_trip_dates("2024-02-28", 2) == ["2024-02-28", "2024-02-29"]


@pytest.mark.parametrize("start,days", [("2024-06-10", 1), ("2023-11-25", 14), ("2024-02-20", 45)])
def test_derive_trip_dates_length_and_order(start, days):
    dates = derive_trip_dates(start, days)
    assert len(dates) == days
    assert len(set(dates)) == days
    assert dates[0] == start
    parsed = [date.fromisoformat(d) for d in dates]
    assert all(b - a == timedelta(days=1) for a, b in zip(parsed, parsed[1:]))


@pytest.mark.parametrize(
    "start,days",
    [("", 3), ("not-a-date", 3), ("2024-02-30", 2), ("2024-03-01", 0), ("2024-03-01", -4), (None, 3)],
)
def test_derive_trip_dates_invalid_inputs_are_empty(start, days):
    assert derive_trip_dates(start, days) == []


def test_derive_trip_dates_ignores_time_of_day():
    assert derive_trip_dates("2024-03-01T23:30:00+05:00", 2) == ["2024-03-01", "2024-03-02"]
    assert derive_trip_dates("2024-03-01T00:00:00Z", 1) == ["2024-03-01"]


@pytest.mark.parametrize(
    "raw,expected",
    [(5, 5), ("7", 7), (2.9, 2), ("4.5", 4), ("abc", 1), ("", 1), (None, 1), (0, 1), (-3, 1), (float("nan"), 1), (45, 45)],
)
def test_coerce_days(raw, expected):
    assert coerce_days(raw) == expected


def test_formatting_helpers():
    assert format_currency(1250) == "$1,250"
    assert format_currency(99.6, "EUR") == "100 EUR"
    assert format_display_date("2024-03-01") == "Fri Mar 01"
    assert format_display_date("") == "-"
    assert format_display_date("soon") == "soon"


def test_derive_trip_dates_past_last_representable_date_is_empty():
    assert derive_trip_dates("9999-12-30", 3) == []
    assert derive_trip_dates("9999-12-30", 2) == ["9999-12-30", "9999-12-31"]
    assert derive_trip_dates("2024-03-01", 10**9) == []
