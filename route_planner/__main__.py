"""Command line entry point: ``python -m route_planner FROM TO``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import get_config
from .container import Container
from .domain.models import TransportMode
from .observability import configure_logging
from .services.planner import RoutePlannerService


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="route_planner",
        description="Find the shortest route between two cities using one transport mode.",
    )
    parser.add_argument("departure", type=str, help="Departure city name.")
    parser.add_argument("arrival", type=str, help="Arrival city name.")
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=[m.name.lower() for m in TransportMode],
        help="Transport mode (defaults to the configured mode).",
    )
    parser.add_argument(
        "--cities",
        type=Path,
        default=None,
        help="Tab-separated cities file (name, country, population, lat, lon).",
    )
    parser.add_argument(
        "--links",
        type=Path,
        default=None,
        help="Tab-separated links file (origin, destination).",
    )
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="Write the route as a CSV table to this path.",
    )
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="Write an HTML map of the route to this path.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = get_config()

    routing = config.routing
    updates = {}
    if args.cities is not None:
        updates["cities_file"] = args.cities.resolve()
    if args.links is not None:
        updates["links_file"] = args.links.resolve()
    if updates:
        routing = routing.model_copy(update=updates)
        config = config.model_copy(update={"routing": routing})

    configure_logging(config.observability)
    container = Container.create_default(config)

    planner: RoutePlannerService = container.resolve(RoutePlannerService)
    route, error = planner.plan_safe(
        args.departure,
        args.arrival,
        args.mode or routing.default_mode,
        export_path=args.export,
        map_path=args.map,
    )
    if route is None:
        print(error, file=sys.stderr)
        return 1

    print(planner.format_result(route))
    return 0


if __name__ == "__main__":
    sys.exit(main())
