"""Per-date hotel and meal selections with board-type rules."""

from __future__ import annotations

from copy import deepcopy
import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional

from .errors import InvalidMealField
from .models import DailySelection, DINNER, HALF_BOARD, LUNCH, NO_BOARD


logger = logging.getLogger(__name__)

_FIELD_NAMES = {
    LUNCH: "lunch_id",
    "lunchId": "lunch_id",
    "lunch_id": "lunch_id",
    DINNER: "dinner_id",
    "dinnerId": "dinner_id",
    "dinner_id": "dinner_id",
}
_OTHER_MEAL = {"lunch_id": "dinner_id", "dinner_id": "lunch_id"}


def meal_attribute(field: str) -> str:
    try:
        return _FIELD_NAMES[field]
    except KeyError:
        raise InvalidMealField(f"Meal field must be 'lunch' or 'dinner', got {field!r}") from None


class DailySelectionStore:
    """Mapping of trip date to :class:`DailySelection`.

    ``board_type_provider`` is queried on every meal edit so the store never
    keeps its own copy of the board type. All access goes through one lock.
    """

    def __init__(self, board_type_provider: Callable[[], str]) -> None:
        self._board_type = board_type_provider
        self._selections: Dict[str, DailySelection] = {}
        self._lock = threading.RLock()

    def __contains__(self, date: str) -> bool:
        with self._lock:
            return date in self._selections

    def __len__(self) -> int:
        with self._lock:
            return len(self._selections)

    def dates(self) -> List[str]:
        with self._lock:
            return list(self._selections)

    def get(self, date: str) -> DailySelection:
        with self._lock:
            return deepcopy(self._selections.get(date, DailySelection()))

    def snapshot(self) -> Dict[str, DailySelection]:
        with self._lock:
            return deepcopy(self._selections)

    def _get_or_create(self, date: str) -> DailySelection:
        selection = self._selections.get(date)
        if selection is None:
            selection = DailySelection()
            self._selections[date] = selection
        return selection

    def set_hotel(self, date: str, hotel_id: Optional[int]) -> None:
        with self._lock:
            self._get_or_create(date).hotel_id = hotel_id
            logger.debug("Hotel for %s set to %s", date, hotel_id)

    def set_meal(self, date: str, field: str, meal_id: Optional[int]) -> bool:
        """Set or clear one meal; returns False when NoBoard ignores the edit."""

        attribute = meal_attribute(field)
        with self._lock:
            board_type = self._board_type()
            if board_type == NO_BOARD:
                logger.debug("Ignoring %s edit for %s under No Board", field, date)
                return False

            selection = self._get_or_create(date)
            setattr(selection, attribute, meal_id)
            if meal_id is not None and board_type == HALF_BOARD:
                setattr(selection, _OTHER_MEAL[attribute], None)
            logger.debug("%s for %s set to %s", attribute, date, meal_id)
            return True

    def clear_meals(self, dates: Iterable[str]) -> None:
        with self._lock:
            for date in dates:
                selection = self._selections.get(date)
                if selection is not None:
                    self._selections[date] = DailySelection(hotel_id=selection.hotel_id)

    def sync_with_dates(self, dates: Iterable[str]) -> None:
        """Rebuild the mapping so its keys are exactly ``dates``."""

        with self._lock:
            previous = self._selections
            synced: Dict[str, DailySelection] = {}
            for date in dates:
                existing = previous.get(date)
                synced[date] = existing if existing is not None else DailySelection()
            dropped = len(set(previous) - set(synced))
            self._selections = synced
            logger.info("Selections synced to %s date(s), %s dropped", len(synced), dropped)

    def drop_ids(
        self, hotel_ids: Iterable[int], lunch_ids: Iterable[int], dinner_ids: Iterable[int]
    ) -> int:
        """Clear any stored id missing from the catalog list for its own field."""

        valid = {
            "hotel_id": set(hotel_ids),
            "lunch_id": set(lunch_ids),
            "dinner_id": set(dinner_ids),
        }
        cleared = 0
        with self._lock:
            for selection in self._selections.values():
                for attribute, ids in valid.items():
                    value = getattr(selection, attribute)
                    if value is not None and value not in ids:
                        setattr(selection, attribute, None)
                        cleared += 1
        return cleared
