"""Domain layer - Core routing models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityNotFoundError,
    ExportError,
    LoadError,
    NoRouteFoundError,
    RenderingError,
    RoutePlannerError,
)
from .models import (
    EARTH_RADIUS_KM,
    City,
    Link,
    LoadSummary,
    Route,
    RouteRequest,
    TransportMode,
    WayPoint,
    distance,
)

__all__ = [
    # Models
    "EARTH_RADIUS_KM",
    "WayPoint",
    "City",
    "Link",
    "TransportMode",
    "Route",
    "RouteRequest",
    "LoadSummary",
    "distance",
    # Errors
    "RoutePlannerError",
    "CityNotFoundError",
    "NoRouteFoundError",
    "LoadError",
    "ExportError",
    "RenderingError",
]
