"""Trip session: the single update path for configuration and selections."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from .config import get_settings
from .errors import DateOutOfRange
from .models import (
    DailySelection,
    DayBreakdown,
    PricingSummary,
    TripConfig,
    NO_BOARD,
    selections_to_dict,
    trip_config_to_dict,
    pricing_summary_to_dict,
)
from .pricing import compute_breakdown, summarize_pricing
from .selections import DailySelectionStore
from .services.catalog import hotels_for, meals_for
from .trip_config import TripConfigState, normalize_field
from .utils import derive_trip_dates


logger = logging.getLogger(__name__)


class TripSession:
    """Owns one trip's configuration and per-day selections.

    Every mutation runs under the session lock, and any change to the start
    date or day count resyncs the selections before the call returns, so the
    next pricing read never sees entries for dates outside the trip.
    """

    def __init__(
        self,
        config: Optional[TripConfig] = None,
        clear_stale_on_destination_change: Optional[bool] = None,
    ) -> None:
        settings = get_settings()
        self._lock = threading.RLock()
        self._config = TripConfigState(config)
        self._store = DailySelectionStore(lambda: self._config.board_type)
        self.currency = settings.currency
        if clear_stale_on_destination_change is None:
            clear_stale_on_destination_change = settings.clear_stale_on_destination_change
        self.clear_stale_on_destination_change = clear_stale_on_destination_change
        self._dates: List[str] = []
        self._refresh_dates()

    @property
    def config(self) -> TripConfig:
        with self._lock:
            return TripConfig(**trip_config_to_dict(self._config.config))

    @property
    def trip_dates(self) -> List[str]:
        with self._lock:
            return list(self._dates)

    def _refresh_dates(self) -> None:
        config = self._config.config
        self._dates = derive_trip_dates(config.start_date, config.days)
        self._store.sync_with_dates(self._dates)

    def _require_trip_date(self, date: str) -> None:
        if date not in self._dates:
            raise DateOutOfRange(f"{date} is not part of the current trip")

    def update_config(self, key: str, value: Any) -> None:
        with self._lock:
            name = normalize_field(key)
            if name == "board_type":
                self._apply_board_type(value)
                return
            previous_destination = self._config.config.destination
            if self._config.update_field(name, value):
                self._refresh_dates()
                logger.info("Trip now spans %s day(s)", len(self._dates))
            if name == "destination" and self._config.config.destination != previous_destination:
                self._on_destination_change()

    def set_board_type(self, code: str) -> bool:
        with self._lock:
            return self._apply_board_type(code)

    def _apply_board_type(self, code: str) -> bool:
        if not self._config.set_board_type(code):
            return False
        if code == NO_BOARD:
            self._store.clear_meals(self._dates)
        return True

    def _on_destination_change(self) -> None:
        destination = self._config.config.destination
        if not self.clear_stale_on_destination_change:
            logger.info("Destination changed to %s; unmatched selections are priced as absent", destination)
            return
        meals = meals_for(destination)
        cleared = self._store.drop_ids(
            (hotel.id for hotel in hotels_for(destination)),
            (meal.id for meal in meals.lunch),
            (meal.id for meal in meals.dinner),
        )
        logger.info("Destination changed to %s; cleared %s stale selection(s)", destination, cleared)

    def set_hotel(self, date: str, hotel_id: Optional[int]) -> None:
        with self._lock:
            self._require_trip_date(date)
            self._store.set_hotel(date, hotel_id)

    def set_meal(self, date: str, field: str, meal_id: Optional[int]) -> bool:
        with self._lock:
            self._require_trip_date(date)
            return self._store.set_meal(date, field, meal_id)

    def selections(self) -> Dict[str, DailySelection]:
        with self._lock:
            return self._store.snapshot()

    def breakdown(self) -> List[DayBreakdown]:
        with self._lock:
            destination = self._config.config.destination
            return compute_breakdown(
                self._dates, self._store.snapshot(), hotels_for(destination), meals_for(destination)
            )

    def pricing(self) -> PricingSummary:
        with self._lock:
            destination = self._config.config.destination
            return summarize_pricing(
                self._dates,
                self._store.snapshot(),
                hotels_for(destination),
                meals_for(destination),
                self.currency,
            )

    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "config": trip_config_to_dict(self._config.config),
                "trip_dates": list(self._dates),
                "selections": selections_to_dict(self._store.snapshot()),
                "pricing": pricing_summary_to_dict(self.pricing()),
            }
