"""Core data models for the trip planner."""

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any

FULL_BOARD = "FB"
HALF_BOARD = "HB"
NO_BOARD = "NB"
BOARD_CODES = (FULL_BOARD, HALF_BOARD, NO_BOARD)

LUNCH = "lunch"
DINNER = "dinner"
MEAL_FIELDS = (LUNCH, DINNER)


@dataclass
class TripConfig:
    citizenship: str
    start_date: str
    days: int
    destination: str
    board_type: str = FULL_BOARD


@dataclass
class DailySelection:
    hotel_id: Optional[int] = None
    lunch_id: Optional[int] = None
    dinner_id: Optional[int] = None

    def is_empty(self) -> bool:
        return self.hotel_id is None and self.lunch_id is None and self.dinner_id is None


@dataclass(frozen=True)
class CatalogEntry:
    id: int
    name: str
    price: float


@dataclass(frozen=True)
class MealOptions:
    lunch: List[CatalogEntry] = field(default_factory=list)
    dinner: List[CatalogEntry] = field(default_factory=list)


@dataclass(frozen=True)
class BoardType:
    code: str
    name: str
    description: str


@dataclass(frozen=True)
class Country:
    id: int
    name: str


@dataclass
class DayBreakdown:
    date: str
    hotel: Optional[CatalogEntry] = None
    lunch: Optional[CatalogEntry] = None
    dinner: Optional[CatalogEntry] = None
    subtotal: float = 0


@dataclass
class PricingSummary:
    days: List[DayBreakdown]
    grand_total: float
    currency: str
    missing_hotel_dates: List[str] = field(default_factory=list)


def trip_config_to_dict(config: TripConfig) -> Dict[str, Any]:
    return asdict(config)


def selections_to_dict(selections: Dict[str, DailySelection]) -> Dict[str, Dict[str, Any]]:
    """Serialize a date -> selection mapping, keeping date order."""

    return {date: asdict(selection) for date, selection in selections.items()}


def pricing_summary_to_dict(summary: PricingSummary) -> Dict[str, Any]:
    """Convenience helper for serializing pricing summaries in APIs."""

    return asdict(summary)
