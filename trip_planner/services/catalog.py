"""Static hotel and meal catalog per destination."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..models import (
    BoardType,
    CatalogEntry,
    Country,
    MealOptions,
    FULL_BOARD,
    HALF_BOARD,
    NO_BOARD,
)

COUNTRIES: List[Country] = [
    Country(id=1, name="Turkey"),
    Country(id=2, name="UAE"),
    Country(id=3, name="Italy"),
]

BOARD_TYPES: List[BoardType] = [
    BoardType(
        code=FULL_BOARD,
        name="Full Board",
        description="Lunch and dinner can both be added to any day.",
    ),
    BoardType(
        code=HALF_BOARD,
        name="Half Board",
        description="Pick either lunch or dinner for each day, not both.",
    ),
    BoardType(
        code=NO_BOARD,
        name="No Board",
        description="Accommodation only; meals are not available.",
    ),
]

HOTELS_BY_COUNTRY: Dict[str, List[CatalogEntry]] = {
    "Turkey": [
        CatalogEntry(id=101, name="Hilton Istanbul", price=120),
        CatalogEntry(id=102, name="Swissotel Bosphorus", price=150),
        CatalogEntry(id=103, name="Cappadocia Cave Suites", price=95),
    ],
    "UAE": [
        CatalogEntry(id=201, name="Burj Al Arab", price=500),
        CatalogEntry(id=202, name="Atlantis The Palm", price=350),
        CatalogEntry(id=203, name="Rove Downtown", price=90),
    ],
    "Italy": [
        CatalogEntry(id=301, name="Hotel Artemide Rome", price=180),
        CatalogEntry(id=302, name="Hotel Danieli Venice", price=260),
        CatalogEntry(id=303, name="Hotel Brunelleschi Florence", price=170),
    ],
}

MEALS_BY_COUNTRY: Dict[str, MealOptions] = {
    "Turkey": MealOptions(
        lunch=[
            CatalogEntry(id=1101, name="Turkish Kebab Plate", price=15),
            CatalogEntry(id=1102, name="Meze Selection", price=12),
        ],
        dinner=[
            CatalogEntry(id=1201, name="Bosphorus Fish Dinner", price=30),
            CatalogEntry(id=1202, name="Ottoman Feast", price=25),
        ],
    ),
    "UAE": MealOptions(
        lunch=[
            CatalogEntry(id=2101, name="Shawarma Lunch", price=10),
            CatalogEntry(id=2102, name="Arabic Mixed Grill", price=22),
        ],
        dinner=[
            CatalogEntry(id=2201, name="Desert Safari BBQ", price=45),
            CatalogEntry(id=2202, name="Marina Seafood Dinner", price=40),
        ],
    ),
    "Italy": MealOptions(
        lunch=[
            CatalogEntry(id=3101, name="Pizza Margherita", price=14),
            CatalogEntry(id=3102, name="Panini and Salad", price=11),
        ],
        dinner=[
            CatalogEntry(id=3201, name="Pasta Carbonara Dinner", price=24),
            CatalogEntry(id=3202, name="Florentine Steak", price=38),
        ],
    ),
}


def default_destination() -> str:
    return COUNTRIES[0].name if COUNTRIES else ""


def hotels_for(destination: str) -> List[CatalogEntry]:
    return list(HOTELS_BY_COUNTRY.get(destination, []))


def meals_for(destination: str) -> MealOptions:
    return MEALS_BY_COUNTRY.get(destination, MealOptions())


def get_board_type(code: str) -> Optional[BoardType]:
    for board_type in BOARD_TYPES:
        if board_type.code == code:
            return board_type
    return None


def is_valid_board_code(code: str) -> bool:
    return get_board_type(code) is not None
