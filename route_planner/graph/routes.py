"""Routing engine: link set, graph queries and shortest-route search.

The engine owns an in-memory list of mode-tagged links, appended in
bulk from tab-separated files. Queries resolve city names through an
injected lookup, notify the registered observers, build the
mode-specific subgraph over a candidate set of cities and run Dijkstra
on it.

Queries never raise for a missing city or a missing path; both come
back as ``None``. Loads never raise for a missing file; the summary
reports it.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..domain.models import City, Link, LoadSummary, Route, RouteRequest, TransportMode
from ..io.records import read_records
from ..ports.graph import CitiesBetweenPort, CityLookupPort, RouteRequestObserver
from .dijkstra import shortest_path_tree, walk_back


@dataclass
class Routes:
    """Holds the links of a transportation network and answers route queries.

    Loading and querying share one lock: a load appends its links in a
    single step, and every query works on a snapshot taken under the
    lock, so queries never observe a half-finished load.

    Attributes:
        cities: Resolves city names (the registry owns city identity)
        between: Optional filter bounding the search space of a query
        default_mode: Mode assigned to links read from files
        logger: Logger to report loads and queries to
    """

    cities: CityLookupPort
    between: Optional[CitiesBetweenPort] = None
    default_mode: TransportMode = TransportMode.RAIL
    logger: Optional[logging.Logger] = field(default=None, repr=False)

    _links: List[Link] = field(default_factory=list, init=False, repr=False)
    _observers: List[RouteRequestObserver] = field(
        default_factory=list, init=False, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = self.logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Link set
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        """Number of links held."""
        with self._lock:
            return len(self._links)

    def __len__(self) -> int:
        return self.count

    @property
    def links(self) -> Tuple[Link, ...]:
        """Snapshot of the link set, in insertion order."""
        with self._lock:
            return tuple(self._links)

    def add_link(self, link: Link) -> None:
        with self._lock:
            self._links.append(link)

    def add_links(self, links: Iterable[Link]) -> int:
        """Append several links at once.

        Returns:
            Number of links appended.
        """
        pending = list(links)
        with self._lock:
            self._links.extend(pending)
        return len(pending)

    def read_links(
        self,
        path: Union[str, Path],
        mode: Optional[TransportMode] = None,
    ) -> LoadSummary:
        """Append the links listed in a tab-separated file.

        Each line names an origin and a destination city; extra fields
        are ignored. A link is added only when both names resolve, and
        its distance is the great-circle distance between the two
        cities. Records with an unknown city, fewer than two fields or a
        line that cannot be parsed are counted as skipped.

        A missing or unreadable file is logged and reported with
        ``failed=True``; the links held before the call are kept as is.

        Args:
            path: The links file.
            mode: Mode of the new links (defaults to ``default_mode``).

        Returns:
            LoadSummary describing what was read, added and skipped.
        """
        source = Path(path)
        link_mode = mode or self.default_mode
        self._logger.info(
            "Reading links",
            extra={"path": str(source), "mode": link_mode.name},
        )

        pending: List[Link] = []
        read = skipped = 0
        try:
            for fields in read_records(source):
                read += 1
                if len(fields) < 2:
                    skipped += 1
                    continue
                origin = self.cities.find_city(fields[0])
                destination = self.cities.find_city(fields[1])
                if origin is None or destination is None:
                    skipped += 1
                    continue
                pending.append(Link.between(origin, destination, link_mode))
        except (OSError, UnicodeDecodeError) as e:
            self._logger.error(
                "Failed to read links",
                extra={"path": str(source), "error": str(e)},
            )
            return LoadSummary(source=source, read=read, skipped=skipped, failed=True)

        added = self.add_links(pending)
        self._logger.info(
            "Links loaded",
            extra={
                "path": str(source),
                "read": read,
                "added": added,
                "skipped": skipped,
                "total": self.count,
            },
        )
        return LoadSummary(source=source, read=read, added=added, skipped=skipped)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, observer: RouteRequestObserver) -> None:
        """Register an observer, called before every search."""
        with self._lock:
            self._observers.append(observer)

    def unsubscribe(self, observer: RouteRequestObserver) -> bool:
        """Remove an observer.

        Returns:
            True if the observer was registered.
        """
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                return False
            return True

    def _notify(self, request: RouteRequest) -> None:
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            try:
                observer(request)
            except Exception:
                self._logger.exception(
                    "Route request observer failed",
                    extra={"observer": repr(observer)},
                )

    # ------------------------------------------------------------------
    # Graph queries
    # ------------------------------------------------------------------

    def distinct_cities_by_mode(self, mode: TransportMode) -> List[City]:
        """Return every city touched by a link of ``mode``, in first-seen order."""
        return self._cities_of(self.links, mode)

    def neighbors_of(self, city: City, mode: TransportMode) -> List[City]:
        """Return the opposite endpoint of every ``mode`` link touching ``city``."""
        return [
            link.other_end(city)
            for link in self.links
            if link.transport_mode == mode and link.touches(city)
        ]

    @staticmethod
    def _cities_of(links: Sequence[Link], mode: TransportMode) -> List[City]:
        seen: Dict[City, None] = {}
        for link in links:
            if link.transport_mode == mode:
                seen.setdefault(link.from_city, None)
                seen.setdefault(link.to_city, None)
        return list(seen)

    # ------------------------------------------------------------------
    # Shortest route
    # ------------------------------------------------------------------

    def find_shortest_route(
        self,
        from_name: str,
        to_name: str,
        mode: TransportMode,
    ) -> Optional[Route]:
        """Find the shortest route between two cities using one mode.

        Observers are notified first, in registration order. A failing
        observer is logged and skipped.

        Args:
            from_name: Departure city name.
            to_name: Arrival city name.
            mode: Transport mode every link of the route must carry.

        Returns:
            The Route, with links in travel order and empty when both
            names resolve to the same city. None when a name is unknown,
            the link set is empty, or no ``mode`` path connects the cities.
        """
        self._notify(RouteRequest(from_name, to_name, mode))

        source = self.cities.find_city(from_name)
        target = self.cities.find_city(to_name)
        if source is None or target is None:
            self._logger.info(
                "Unknown city in route request",
                extra={
                    "departure": from_name,
                    "arrival": to_name,
                    "departure_found": source is not None,
                    "arrival_found": target is not None,
                },
            )
            return None

        links = self.links
        if not links:
            self._logger.debug("Route request on empty link set")
            return None

        if source == target:
            return Route(from_city=source, to_city=target, mode=mode)

        candidates = self._candidates(source, target, mode, links)
        index = {city: i for i, city in enumerate(candidates)}

        # Shortest link per unordered pair, adjacency in link insertion order.
        best: Dict[Tuple[int, int], Link] = {}
        adjacency: List[List[Tuple[int, float]]] = [[] for _ in candidates]
        for link in links:
            if link.transport_mode != mode:
                continue
            if not math.isfinite(link.distance) or link.distance < 0:
                continue
            u = index.get(link.from_city)
            v = index.get(link.to_city)
            if u is None or v is None or u == v:
                continue
            adjacency[u].append((v, link.distance))
            adjacency[v].append((u, link.distance))
            key = (min(u, v), max(u, v))
            if key not in best or link.distance < best[key].distance:
                best[key] = link

        s, t = index[source], index[target]
        _, previous = shortest_path_tree(adjacency, s, t)
        path = walk_back(previous, s, t)
        if not path:
            self._logger.info(
                "No route found",
                extra={"departure": source.name, "arrival": target.name, "mode": mode.name},
            )
            return None

        route_links = tuple(
            best[(min(a, b), max(a, b))].oriented_from(candidates[a])
            for a, b in zip(path, path[1:])
        )
        route = Route(from_city=source, to_city=target, mode=mode, links=route_links)
        self._logger.info(
            "Route found",
            extra={
                "departure": source.name,
                "arrival": target.name,
                "mode": mode.name,
                "links": route.num_links,
                "distance_km": route.total_distance,
            },
        )
        return route

    def _candidates(
        self,
        source: City,
        target: City,
        mode: TransportMode,
        links: Sequence[Link],
    ) -> List[City]:
        """Cities the search may visit, source and target always included."""
        if self.between is not None:
            narrowed = self.between.find_cities_between(source, target)
        else:
            narrowed = self._cities_of(links, mode)
        return list(dict.fromkeys([source, *narrowed, target]))
