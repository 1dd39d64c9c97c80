"""Simple CLI entry to price a trip plan described in JSON."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from trip_planner import TripSession
from trip_planner.config import get_settings
from trip_planner.models import pricing_summary_to_dict
from trip_planner.utils import format_currency, format_display_date


logger = logging.getLogger(__name__)


def load_trip_plan(path: Path) -> TripSession:
    """Replay a ``{"config": ..., "selections": ...}`` file through a session."""

    data: Dict[str, Any] = json.loads(path.read_text())
    session = TripSession()
    for key, value in data.get("config", {}).items():
        session.update_config(key, value)

    trip_dates = set(session.trip_dates)
    for date, selection in data.get("selections", {}).items():
        if date not in trip_dates:
            logger.warning("Skipping %s: outside the trip dates", date)
            continue
        if "hotel_id" in selection:
            session.set_hotel(date, selection["hotel_id"])
        for field in ("lunch", "dinner"):
            if f"{field}_id" in selection:
                session.set_meal(date, field, selection[f"{field}_id"])
    return session


def render_table(session: TripSession) -> str:
    summary = session.pricing()
    lines = []
    for day in summary.days:
        hotel = day.hotel.name if day.hotel else "(select a hotel)"
        meals = ", ".join(meal.name for meal in (day.lunch, day.dinner) if meal) or "-"
        lines.append(
            f"{format_display_date(day.date):<12} {hotel:<32} {meals:<40} "
            f"{format_currency(day.subtotal, summary.currency):>10}"
        )
    lines.append(f"{'Total':<86} {format_currency(summary.grand_total, summary.currency):>10}")
    if summary.missing_hotel_dates:
        lines.append(f"Hint: {len(summary.missing_hotel_dates)} day(s) still need a hotel.")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Price a multi-day trip from a JSON plan.")
    parser.add_argument("plan_file", type=Path, help="Path to a JSON file with config and selections")
    parser.add_argument("--output", type=Path, help="Optional path to save the pricing JSON")
    parser.add_argument("--table", action="store_true", help="Print a readable table instead of JSON")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level)
    session = load_trip_plan(args.plan_file)

    if args.table:
        print(render_table(session))
        return

    result = json.dumps(pricing_summary_to_dict(session.pricing()), indent=2)
    if args.output:
        args.output.write_text(result)
        print(f"Pricing saved to {args.output}")
    else:
        print(result)


if __name__ == "__main__":
    main()
