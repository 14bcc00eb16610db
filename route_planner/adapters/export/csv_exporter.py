"""CSV route exporter adapter.

Writes a computed route as a table with one row per link:
``From, To, Distance, TransportMode``. The file opens directly in
spreadsheet tools.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import ExportError
from ...domain.models import Route

HEADER = ("From", "To", "Distance", "TransportMode")


@dataclass
class CsvRouteExporter:
    """Tabular route exporter.

    This adapter implements RouteExporterPort.

    Attributes:
        delimiter: Field separator
        decimals: Number of decimals written for distances
    """

    delimiter: str = ","
    decimals: int = 2
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def export(self, route: Route, output_path: Path) -> Path:
        """Write the route to ``output_path``.

        Raises:
            ExportError: If the route is empty or the file cannot be written.
        """
        if route.is_empty:
            raise ExportError(
                "Cannot export empty route",
                output_path=str(output_path),
            )

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, delimiter=self.delimiter)
                writer.writerow(HEADER)
                for link in route.links:
                    writer.writerow(
                        (
                            link.from_city.name,
                            link.to_city.name,
                            f"{link.distance:.{self.decimals}f}",
                            link.transport_mode.name.capitalize(),
                        )
                    )
        except OSError as e:
            raise ExportError(
                f"Route export failed: {e}",
                output_path=str(output_path),
                cause=e,
            )

        self._logger.info(
            "Route exported",
            extra={"output_path": str(output_path), "links": route.num_links},
        )
        return output_path
