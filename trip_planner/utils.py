"""Utility helpers."""

from datetime import date, datetime, timedelta
import math
from typing import List, Optional, Union

FRIENDLY_DATE_FMT = "%a %b %d"


def _parse_date(value: str) -> Optional[date]:
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    try:
        if "T" in value or " " in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def derive_trip_dates(start_date: str, days: int) -> List[str]:
    """Return ``days`` consecutive ISO dates starting at ``start_date``.

    An empty or unparseable start date, or fewer than one day, yields an empty
    list: the trip is simply not configured yet. A timestamp keeps its own
    calendar date and its time of day is ignored. A range that would run past
    ``date.max`` is also empty.
    """

    if not isinstance(days, int) or isinstance(days, bool) or days < 1:
        return []
    start = _parse_date(start_date)
    if start is None:
        return []
    # A range running past the last representable date is not a real trip.
    if days > (date.max - start).days + 1:
        return []
    return [(start + timedelta(days=offset)).isoformat() for offset in range(days)]


def coerce_days(value: Union[str, int, float, None]) -> int:
    """Turn raw input into a day count, falling back to 1."""

    if isinstance(value, bool) or value is None:
        return 1
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 1
    if math.isnan(number) or math.isinf(number):
        return 1
    return max(int(number), 1)


def format_currency(value: float, currency: str = "USD") -> str:
    """Format a whole-unit amount, e.g. ``$1,250`` or ``1,250 EUR``."""

    amount = f"{round(value):,}"
    if currency == "USD":
        return f"${amount}"
    return f"{amount} {currency}"


def format_display_date(value: str) -> str:
    """Return a short heading like 'Fri Mar 01'; unparseable values pass through."""

    if not value:
        return "-"
    parsed = _parse_date(value)
    if not parsed:
        return value
    return parsed.strftime(FRIENDLY_DATE_FMT)
