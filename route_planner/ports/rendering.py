"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Route


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Map renderers visualize routes on interactive maps.
    """

    def render(self, route: Route, output_path: Path) -> Path:
        """Render a route on a map and save to file.

        Args:
            route: The computed route.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
