"""journey CLI entry point: generate one random journey and print it as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from journey.domain.exceptions import DomainError
from journey.domain.models import Coordinate
from journey.services.journey_presenter import directions_waypoints, present_journey
from journey.services.journey_service import JourneyRequest, generate_journey
from journey.shared.exceptions import ProviderError

DEFAULT_ORIGIN = (-122.2685, 47.5505)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="journey", description="Pick a random reachable destination.")
    parser.add_argument(
        "--origin", nargs=2, type=float, default=list(DEFAULT_ORIGIN), metavar=("LON", "LAT"), help="start point"
    )
    parser.add_argument("--duration", type=int, default=30, help="total travel time in minutes")
    parser.add_argument("--round-trip", action="store_true", help="halve the outbound budget")
    parser.add_argument("--category", default="coffee", help="destination category, e.g. 'bubble tea'")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible journey")
    parser.add_argument("--attempts", type=int, default=None, help="retries when nothing matches")
    parser.add_argument("--geojson", action="store_true", help="print the GeoJSON presentation payload")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        request = JourneyRequest(
            origin=Coordinate.from_pair(args.origin),
            is_one_way=not args.round_trip,
            duration_minutes=args.duration,
            category=args.category,
            seed=args.seed,
        )
        journey = asyncio.run(generate_journey(request, max_attempts=args.attempts))
    except (ValidationError, DomainError, ProviderError) as exc:
        print(f"journey failed: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    if args.geojson:
        payload = present_journey(journey)
    else:
        payload = {
            "journey": journey.model_dump(mode="json"),
            "waypoints": directions_waypoints(journey),
        }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
