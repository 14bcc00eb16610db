"""Top-level package for the route planner.

The package computes the shortest route between two cities of a
transportation network, restricted to one transport mode:

- ``domain``: waypoints, cities, links and routes
- ``graph``: the routing engine and Dijkstra's algorithm
- ``adapters``: city registry, CSV export and map rendering
- ``services``: orchestration used by the command line
"""

from .domain.models import City, Link, Route, TransportMode, WayPoint
from .graph.routes import Routes

__all__ = ["City", "Link", "Route", "Routes", "TransportMode", "WayPoint"]
