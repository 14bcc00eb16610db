"""Route planner service - Main orchestrator.

Turns a routing request into a Route and the optional artefacts a
caller asked for (tabular export, map).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..domain.errors import CityNotFoundError, NoRouteFoundError, RoutePlannerError
from ..domain.models import Route, TransportMode
from ..graph.routes import Routes
from ..ports.export import RouteExporterPort
from ..ports.rendering import MapRendererPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes.

    This service orchestrates the full flow:
    1. Mode parsing
    2. Shortest-route search
    3. Optional tabular export
    4. Optional map rendering

    Attributes:
        routes: The routing engine
        exporter: Optional tabular exporter
        map_renderer: Optional map rendering
    """

    routes: Routes
    exporter: Optional[RouteExporterPort] = None
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(
        self,
        departure: str,
        arrival: str,
        mode: Union[TransportMode, str] = TransportMode.RAIL,
        export_path: Optional[Path] = None,
        map_path: Optional[Path] = None,
    ) -> Route:
        """Plan a route between two cities.

        Args:
            departure: Departure city name.
            arrival: Arrival city name.
            mode: Transport mode, as enum or name (e.g. "rail").
            export_path: Where to write the route table, if wanted.
            map_path: Where to write the route map, if wanted.

        Returns:
            The computed Route.

        Raises:
            ValueError: If the mode name is unknown.
            CityNotFoundError: If a city name does not resolve.
            NoRouteFoundError: If no path connects the cities.
            ExportError: If the export fails.
            RenderingError: If map generation fails.
        """
        transport_mode = TransportMode.parse(mode)
        route = self.routes.find_shortest_route(departure, arrival, transport_mode)

        if route is None:
            for name in (departure, arrival):
                if self.routes.cities.find_city(name) is None:
                    raise CityNotFoundError(f"City not found: {name}", city_name=name)
            raise NoRouteFoundError(
                f"No {transport_mode.name.lower()} route from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
                mode=transport_mode.name,
            )

        if export_path is not None and self.exporter is not None and not route.is_empty:
            self.exporter.export(route, export_path)

        if map_path is not None and self.map_renderer is not None and not route.is_empty:
            self.map_renderer.render(route, map_path)

        return route

    def plan_safe(
        self,
        departure: str,
        arrival: str,
        mode: Union[TransportMode, str] = TransportMode.RAIL,
        export_path: Optional[Path] = None,
        map_path: Optional[Path] = None,
    ) -> tuple[Optional[Route], Optional[str]]:
        """Plan a route, returning an error message instead of raising.

        Returns:
            Tuple of (Route or None, error message or None).
        """
        try:
            return self.plan(departure, arrival, mode, export_path, map_path), None
        except ValueError as e:
            return None, f"Error: {e}"
        except CityNotFoundError as e:
            return None, f"Unknown city: {e.city_name}"
        except NoRouteFoundError as e:
            return None, (
                f"No path found between {e.departure} and {e.arrival} "
                f"by {e.mode.lower()}"
            )
        except RoutePlannerError as e:
            self._logger.warning("Route artefact failed", extra={"error": str(e)})
            return None, f"Error: {e}"

    def format_result(self, route: Route) -> str:
        """Format a route as a human-readable string."""
        if route.is_empty:
            return f"Already there: {route.from_city.name}"

        lines = [
            f"{link.from_city.name} -> {link.to_city.name}: {link.distance:.1f} km"
            for link in route.links
        ]
        path_str = " -> ".join(city.name for city in route.cities)
        return (
            f"Shortest path ({route.mode.name.lower()}): {path_str}\n"
            + "\n".join(lines)
            + f"\nTotal distance: {route.total_distance:.1f} km"
        )
