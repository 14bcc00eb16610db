"""In-memory city registry adapter.

This adapter implements CityLookupPort and CitiesBetweenPort. It loads
cities from a tab-separated file and adds:
- Case-insensitive name resolution
- A bounding-box filter narrowing the search space of a query
- Logging of skipped rows
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Union

from ...domain.errors import LoadError
from ...domain.models import City
from ...io.records import read_records


def _key(name: str) -> str:
    return name.strip().casefold()


@dataclass
class InMemoryCityRegistry:
    """City registry keyed by name.

    Rows of a cities file are either
    ``name, country, population, latitude, longitude`` or
    ``name, latitude, longitude``.
    """

    _cities: Dict[str, City] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._cities

    def add(self, city: City) -> None:
        """Register a city, replacing any city with the same name."""
        self._cities[_key(city.name)] = city

    def read_cities(self, path: Union[str, Path]) -> int:
        """Load cities from a tab-separated file.

        Args:
            path: The cities file.

        Returns:
            Number of cities registered from the file.

        Raises:
            LoadError: If the file cannot be read.
        """
        source = Path(path)
        added = skipped = 0

        try:
            for fields in read_records(source):
                city = self._parse(fields)
                if city is None:
                    skipped += 1
                    self._logger.warning(
                        "Skipping malformed city row",
                        extra={"path": str(source), "row": fields},
                    )
                    continue
                self.add(city)
                added += 1
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(
                f"Failed to read cities: {e}",
                file_path=str(source),
                cause=e,
            )

        self._logger.info(
            "Cities loaded",
            extra={"path": str(source), "added": added, "skipped": skipped},
        )
        return added

    @staticmethod
    def _parse(fields: Sequence[str]) -> Optional[City]:
        try:
            if len(fields) >= 5:
                name, country, population, lat, lon = fields[:5]
                return City.at(
                    name,
                    float(lat),
                    float(lon),
                    country=country,
                    population=int(population or 0),
                )
            if len(fields) >= 3:
                name, lat, lon = fields[:3]
                return City.at(name, float(lat), float(lon))
        except ValueError:
            return None
        return None

    def find_city(self, name: str) -> Optional[City]:
        """Resolve a city by name, ignoring case and surrounding blanks."""
        return self._cities.get(_key(name))

    def find_cities_between(self, source: City, target: City) -> List[City]:
        """Return the cities inside the lat/lon box spanned by two cities.

        The source comes first and the target last; the others are
        ordered by distance from the source.
        """
        lat_min, lat_max = sorted((source.location.latitude, target.location.latitude))
        lon_min, lon_max = sorted((source.location.longitude, target.location.longitude))

        inside = [
            city
            for city in self._cities.values()
            if city != source
            and city != target
            and lat_min <= city.location.latitude <= lat_max
            and lon_min <= city.location.longitude <= lon_max
        ]
        inside.sort(key=lambda city: source.location.distance(city.location))

        if source == target:
            return [source]
        return [source, *inside, target]
