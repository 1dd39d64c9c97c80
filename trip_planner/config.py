"""Application configuration helpers."""

from dataclasses import dataclass, field
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://localhost:3000",
    "https://127.0.0.1:3000",
]


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    currency: str = "USD"
    default_days: int = 3
    max_days: int = 30
    default_board_type: str = "FB"
    log_level: str = "INFO"
    clear_stale_on_destination_change: bool = False
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}.")
    return value


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> Optional[List[str]]:
    raw = os.getenv(name)
    if not raw:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    board_type = (os.getenv("TRIP_PLANNER_DEFAULT_BOARD_TYPE") or "FB").strip().upper()
    if board_type not in {"FB", "HB", "NB"}:
        raise ValueError(
            "TRIP_PLANNER_DEFAULT_BOARD_TYPE must be one of FB, HB or NB."
        )

    return Settings(
        currency=(os.getenv("TRIP_PLANNER_CURRENCY") or "USD").strip().upper(),
        default_days=_env_int("TRIP_PLANNER_DEFAULT_DAYS", 3),
        max_days=_env_int("TRIP_PLANNER_MAX_DAYS", 30),
        default_board_type=board_type,
        log_level=(os.getenv("TRIP_PLANNER_LOG_LEVEL") or "INFO").strip().upper(),
        clear_stale_on_destination_change=_env_flag("TRIP_PLANNER_CLEAR_STALE_SELECTIONS"),
        cors_origins=_env_list("TRIP_PLANNER_CORS_ORIGINS") or list(DEFAULT_CORS_ORIGINS),
    )
