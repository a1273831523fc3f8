#!/usr/bin/env python3
"""
Print the routes and upcoming arrivals for one stop.

  python scripts/stop_info.py 9d7f733a-d532-4fca-a922-4c978b79681c
  python scripts/stop_info.py --json <stop_id>
  python scripts/stop_info.py --base-url http://localhost:8080/api/ --debug <stop_id>
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))

from settings import get_settings
from mgtapi.transit import StopData, TransitAPIError, TransitClient

EXAMPLE_STOP_ID = "9d7f733a-d532-4fca-a922-4c978b79681c"


def format_stop(data: StopData) -> str:
    lines = [f"Остановка: {data.name}"]
    for route in data.route_path:
        arrivals = ", ".join(
            f.arrival.astimezone().strftime("%H:%M") + ("*" if f.is_telemetry else "")
            for f in route.external_forecast
        )
        lines.append(f"  {route.type} {route.number} -> {route.last_stop_name}: {arrivals or '-'}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Show stop data from the Moscow transport API")
    parser.add_argument("stop_id", nargs="?", default=EXAMPLE_STOP_ID, help="Stop id (UUID)")
    parser.add_argument(
        "--base-url",
        default=settings.transit_base_url,
        help="API base URL, ending with '/' (default: production API)",
    )
    parser.add_argument("--json", action="store_true", help="Print the raw StopData JSON")
    parser.add_argument("--debug", action="store_true", help="Log upstream error bodies")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or settings.debug) else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )

    with TransitClient(args.base_url, escape_stop_id=settings.transit_escape_stop_id) as client:
        try:
            data = client.get_stop_data(args.stop_id)
        except TransitAPIError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(data.to_json() if args.json else format_stop(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())
