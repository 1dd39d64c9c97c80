"""Multi-day trip planner: per-day hotel and meal selections with pricing."""

from .models import TripConfig, DailySelection, CatalogEntry, DayBreakdown, PricingSummary
from .planner import TripSession
from .pricing import compute_breakdown, compute_grand_total
from .utils import derive_trip_dates

__all__ = [
    "TripConfig",
    "DailySelection",
    "CatalogEntry",
    "DayBreakdown",
    "PricingSummary",
    "TripSession",
    "compute_breakdown",
    "compute_grand_total",
    "derive_trip_dates",
]
