"""Graph ports - Abstractions consumed and exposed by the routing engine.

The engine resolves city names through a lookup, may narrow its search
space through a "cities between" filter, and notifies observers of
every route request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import City, RouteRequest

# Observers receive the request synchronously, before the search runs.
RouteRequestObserver = Callable[["RouteRequest"], None]


class CityLookupPort(Protocol):
    """Port for resolving city names.

    Implementation: adapters/registry/memory_registry.py

    The registry owns city identity: it guarantees one City per name.
    """

    def find_city(self, name: str) -> Optional[City]:
        """Resolve a city by name.

        Args:
            name: The city name (e.g., 'Bern').

        Returns:
            The City, or None if the name is unknown.
        """
        ...


class CitiesBetweenPort(Protocol):
    """Port for bounding the search space of a query.

    Implementation: adapters/registry/memory_registry.py
    """

    def find_cities_between(self, source: City, target: City) -> Sequence[City]:
        """Return the candidate cities for a search from source to target.

        Args:
            source: Departure city.
            target: Arrival city.

        Returns:
            Cities worth considering, ideally source first and target last.
        """
        ...
