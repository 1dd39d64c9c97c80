"""Trip configuration state and its point updates."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
import logging
from typing import Any, Optional

from .config import get_settings
from .errors import InvalidBoardType, UnknownConfigField
from .models import TripConfig
from .services.catalog import default_destination, is_valid_board_code
from .utils import coerce_days


logger = logging.getLogger(__name__)

FIELD_ALIASES = {
    "citizenship": "citizenship",
    "start_date": "start_date",
    "startDate": "start_date",
    "days": "days",
    "destination": "destination",
    "board_type": "board_type",
    "boardType": "board_type",
}

DATE_FIELDS = {"start_date", "days"}


def default_trip_config() -> TripConfig:
    settings = get_settings()
    return TripConfig(
        citizenship="",
        start_date=date.today().isoformat(),
        days=settings.default_days,
        destination=default_destination(),
        board_type=settings.default_board_type,
    )


def normalize_field(key: str) -> str:
    try:
        return FIELD_ALIASES[key]
    except KeyError:
        raise UnknownConfigField(f"Unknown trip configuration field: {key!r}") from None


class TripConfigState:
    """Holds the single trip configuration record of a session."""

    def __init__(self, config: Optional[TripConfig] = None) -> None:
        self.config = TripConfig(**asdict(config)) if config is not None else default_trip_config()
        if not is_valid_board_code(self.config.board_type):
            raise InvalidBoardType(f"Unknown board type: {self.config.board_type!r}")
        self.config.days = coerce_days(self.config.days)

    @property
    def board_type(self) -> str:
        return self.config.board_type

    def update_field(self, key: str, value: Any) -> bool:
        """Set one field; returns True when the trip dates' inputs changed."""

        name = normalize_field(key)
        if name == "board_type":
            self.set_board_type(value)
            return False
        if name == "days":
            value = coerce_days(value)
        elif value is None:
            value = ""
        else:
            value = str(value)

        previous = getattr(self.config, name)
        setattr(self.config, name, value)
        logger.debug("Trip config %s: %r -> %r", name, previous, value)
        return name in DATE_FIELDS and previous != value

    def set_board_type(self, code: str) -> bool:
        """Switch board type; returns False when ``code`` is already active."""

        if not is_valid_board_code(code):
            raise InvalidBoardType(f"Unknown board type: {code!r}")
        if code == self.config.board_type:
            return False
        logger.info("Board type changed from %s to %s", self.config.board_type, code)
        self.config.board_type = code
        return True
