"""Typed domain errors for the route planner.

The routing engine itself stays total: unknown cities, missing routes
and unreadable link files are reported as values. These errors are
raised by the service and adapter layers, where a caller asked for a
result that cannot be produced.

All errors inherit from RoutePlannerError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class CityNotFoundError(RoutePlannerError):
    """City name not known to the registry.

    Attributes:
        city_name: The name that failed to resolve
    """

    city_name: str = ""


@dataclass
class NoRouteFoundError(RoutePlannerError):
    """No path connects the requested cities under the given mode.

    Attributes:
        departure: Departure city name
        arrival: Arrival city name
        mode: Transport mode name
    """

    departure: str = ""
    arrival: str = ""
    mode: str = ""


@dataclass
class LoadError(RoutePlannerError):
    """A city or link file could not be read.

    Attributes:
        file_path: Path to the data file
    """

    file_path: Optional[str] = None


@dataclass
class ExportError(RoutePlannerError):
    """Writing a route to a tabular file failed.

    Attributes:
        output_path: Path where the export was attempted
    """

    output_path: Optional[str] = None


@dataclass
class RenderingError(RoutePlannerError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""

