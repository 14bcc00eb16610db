"""Folium map renderer adapter.

Draws a computed route on an interactive HTML map:
- One marker per city on the route
- A polyline following the links in travel order
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import RenderingError
from ...domain.models import Route


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort using Folium for
    generating interactive HTML maps.

    Attributes:
        zoom_start: Initial zoom level of the map
    """

    zoom_start: int = 7
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, route: Route, output_path: Path) -> Path:
        """Render a route on a map and save to file.

        Args:
            route: The computed route.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If rendering fails.
        """
        if route.is_empty:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        cities = route.cities
        self._logger.info(
            "Rendering route map",
            extra={
                "cities": len(cities),
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            coordinates = [
                [c.location.latitude, c.location.longitude] for c in cities
            ]
            center_lat = sum(lat for lat, _ in coordinates) / len(coordinates)
            center_lon = sum(lon for _, lon in coordinates) / len(coordinates)

            m = folium.Map(
                location=[center_lat, center_lon],
                zoom_start=self.zoom_start,
                control_scale=True,
            )

            for i, city in enumerate(cities):
                icon_color = "green" if i == 0 else "red" if i == len(cities) - 1 else "blue"
                folium.Marker(
                    location=[city.location.latitude, city.location.longitude],
                    popup=f"{i + 1}. {city.name}",
                    tooltip=city.name,
                    icon=folium.Icon(color=icon_color),
                ).add_to(m)

            folium.PolyLine(
                coordinates,
                weight=3,
                color="blue",
                opacity=0.8,
                tooltip=f"{route.mode.name.lower()} - {route.total_distance:.1f} km",
            ).add_to(m)
            m.fit_bounds(coordinates)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
