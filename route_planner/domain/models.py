"""Immutable domain models for the route planner.

All models are frozen dataclasses with slots. They carry no
dependencies beyond the standard library and describe the routing
graph: waypoints, cities, mode-tagged links and computed routes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

EARTH_RADIUS_KM = 6371.0


class TransportMode(Enum):
    """Transport mode partitioning the network into subgraphs."""

    SHIP = auto()
    RAIL = auto()
    FLIGHT = auto()
    CAR = auto()
    BUS = auto()
    TRAM = auto()

    @classmethod
    def parse(cls, value: Union[str, "TransportMode"]) -> "TransportMode":
        """Parse a mode name case-insensitively (``"rail"`` -> ``RAIL``).

        Raises:
            ValueError: If the name is not a known mode.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        try:
            return cls[key]
        except KeyError:
            known = ", ".join(m.name.lower() for m in cls)
            raise ValueError(
                f"Unknown transport mode {value!r}, expected one of: {known}"
            ) from None


@dataclass(frozen=True, slots=True)
class WayPoint:
    """A named geographic coordinate, in degrees."""

    name: str
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not math.isfinite(self.latitude) or not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not math.isfinite(self.longitude) or not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def distance(self, other: WayPoint) -> float:
        """Great-circle distance in km (spherical law of cosines)."""
        if (self.latitude, self.longitude) == (other.latitude, other.longitude):
            return 0.0
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        delta_lon = math.radians(self.longitude - other.longitude)
        cosine = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(
            lat2
        ) * math.cos(delta_lon)
        # Rounding can push the cosine slightly outside [-1, 1].
        cosine = max(-1.0, min(1.0, cosine))
        return EARTH_RADIUS_KM * math.acos(cosine)

    def __add__(self, other: WayPoint) -> WayPoint:
        return WayPoint(
            self.name,
            self.latitude + other.latitude,
            self.longitude + other.longitude,
        )

    def __sub__(self, other: WayPoint) -> WayPoint:
        return WayPoint(
            self.name,
            self.latitude - other.latitude,
            self.longitude - other.longitude,
        )

    def __str__(self) -> str:
        if not self.name:
            return f"WayPoint: {self.latitude:.2f}/{self.longitude:.2f}"
        return f"WayPoint: {self.name} {self.latitude:.2f}/{self.longitude:.2f}"


def distance(a: WayPoint, b: WayPoint) -> float:
    """Great-circle distance between two waypoints, in km."""
    return a.distance(b)


@dataclass(frozen=True, slots=True)
class City:
    """A routing vertex located at a waypoint.

    Identity is the name: two cities are equal iff their names match,
    whatever their coordinates or metadata.

    Attributes:
        name: Unique city name within a registry
        location: Coordinates of the city
        country: Country name, informational
        population: Number of inhabitants, informational
    """

    name: str
    location: WayPoint = field(compare=False)
    country: str = field(default="", compare=False)
    population: int = field(default=0, compare=False)

    @classmethod
    def at(
        cls,
        name: str,
        latitude: float,
        longitude: float,
        country: str = "",
        population: int = 0,
    ) -> City:
        """Build a city whose waypoint carries the same name."""
        return cls(
            name=name,
            location=WayPoint(name, latitude, longitude),
            country=country,
            population=population,
        )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Link:
    """A mode-tagged, undirected connection between two cities.

    Attributes:
        from_city: First endpoint
        to_city: Second endpoint
        distance: Great-circle distance between the endpoints, in km
        transport_mode: Mode this connection belongs to
    """

    from_city: City
    to_city: City
    distance: float
    transport_mode: TransportMode = TransportMode.RAIL

    @classmethod
    def between(
        cls,
        from_city: City,
        to_city: City,
        transport_mode: TransportMode = TransportMode.RAIL,
    ) -> Link:
        """Create a link weighted by the great-circle distance of its endpoints."""
        return cls(
            from_city=from_city,
            to_city=to_city,
            distance=from_city.location.distance(to_city.location),
            transport_mode=transport_mode,
        )

    def touches(self, city: City) -> bool:
        """Check if the city is one of the two endpoints."""
        return self.from_city == city or self.to_city == city

    def other_end(self, city: City) -> City:
        """Return the endpoint opposite to ``city``."""
        if self.from_city == city:
            return self.to_city
        if self.to_city == city:
            return self.from_city
        raise ValueError(f"{city.name} is not an endpoint of this link")

    def oriented_from(self, city: City) -> Link:
        """Return this link with ``city`` as its ``from_city``."""
        if self.from_city == city:
            return self
        return Link(self.to_city, self.from_city, self.distance, self.transport_mode)


@dataclass(frozen=True, slots=True)
class RouteRequest:
    """Notification payload sent to observers before each search."""

    from_city: str
    to_city: str
    mode: TransportMode


@dataclass(frozen=True, slots=True)
class Route:
    """Result of a shortest-route query.

    Attributes:
        from_city: Resolved departure city
        to_city: Resolved arrival city
        mode: Transport mode the route was searched in
        links: Links in travel order, empty when departure == arrival
    """

    from_city: City
    to_city: City
    mode: TransportMode
    links: tuple[Link, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no links."""
        return len(self.links) == 0

    @property
    def num_links(self) -> int:
        return len(self.links)

    @property
    def total_distance(self) -> float:
        """Sum of the link distances, in km."""
        return sum(link.distance for link in self.links)

    @property
    def cities(self) -> tuple[City, ...]:
        """Cities visited, departure first and arrival last."""
        if not self.links:
            return (self.from_city,)
        return (self.links[0].from_city,) + tuple(link.to_city for link in self.links)


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Outcome of a bulk link load.

    Attributes:
        source: File the records were read from
        read: Number of non-blank records read
        added: Number of links appended
        skipped: Records dropped (unknown city or too few fields)
        failed: True when the source could not be read at all
    """

    source: Optional[Path] = None
    read: int = 0
    added: int = 0
    skipped: int = 0
    failed: bool = False
