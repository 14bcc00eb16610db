"""Export adapters - Implementations of RouteExporterPort.

Available implementations:
- CsvRouteExporter: One CSV row per link of the route
"""

from .csv_exporter import CsvRouteExporter

__all__ = ["CsvRouteExporter"]
