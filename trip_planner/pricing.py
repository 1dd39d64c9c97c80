"""Per-day and whole-trip pricing from catalog lookups."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .models import CatalogEntry, DailySelection, DayBreakdown, MealOptions, PricingSummary


logger = logging.getLogger(__name__)


def _resolve(entries: Iterable[CatalogEntry], entry_id: Optional[int], kind: str, date: str) -> Optional[CatalogEntry]:
    if entry_id is None:
        return None
    for entry in entries:
        if entry.id == entry_id:
            return entry
    logger.debug("No %s with id %s in catalog for %s; priced as absent", kind, entry_id, date)
    return None


def _price(entry: Optional[CatalogEntry]) -> float:
    return entry.price if entry is not None else 0


def compute_breakdown(
    dates: Sequence[str],
    selections: Dict[str, DailySelection],
    hotels: Sequence[CatalogEntry],
    meals: MealOptions,
) -> List[DayBreakdown]:
    """Resolve each day's selection against the destination catalog."""

    breakdown: List[DayBreakdown] = []
    for date in dates:
        selection = selections.get(date) or DailySelection()
        hotel = _resolve(hotels, selection.hotel_id, "hotel", date)
        lunch = _resolve(meals.lunch, selection.lunch_id, "lunch", date)
        dinner = _resolve(meals.dinner, selection.dinner_id, "dinner", date)
        breakdown.append(
            DayBreakdown(
                date=date,
                hotel=hotel,
                lunch=lunch,
                dinner=dinner,
                subtotal=_price(hotel) + _price(lunch) + _price(dinner),
            )
        )
    return breakdown


def compute_grand_total(breakdown: Iterable[DayBreakdown]) -> float:
    return sum((day.subtotal for day in breakdown), 0)


def missing_hotel_dates(breakdown: Iterable[DayBreakdown]) -> List[str]:
    """Dates that still need a hotel; used for a hint, never an error."""

    return [day.date for day in breakdown if day.hotel is None]


def summarize_pricing(
    dates: Sequence[str],
    selections: Dict[str, DailySelection],
    hotels: Sequence[CatalogEntry],
    meals: MealOptions,
    currency: str,
) -> PricingSummary:
    breakdown = compute_breakdown(dates, selections, hotels, meals)
    return PricingSummary(
        days=breakdown,
        grand_total=compute_grand_total(breakdown),
        currency=currency,
        missing_hotel_dates=missing_hotel_dates(breakdown),
    )
