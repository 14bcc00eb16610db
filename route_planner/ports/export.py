"""Export port - Abstraction for writing routes as tables."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Route


class RouteExporterPort(Protocol):
    """Port for tabular route export.

    Implementation: adapters/export/csv_exporter.py

    Exporters receive the finished route, departure and arrival
    included. The engine knows nothing about the output format.
    """

    def export(self, route: Route, output_path: Path) -> Path:
        """Write the route to a file.

        Args:
            route: The computed route.
            output_path: Destination file.

        Returns:
            Path to the written file.
        """
        ...
