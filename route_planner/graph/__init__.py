"""Routing graph and shortest-path search.

This subpackage holds the link set of the transportation network and
runs Dijkstra's algorithm on its mode-specific subgraphs.
"""

from .dijkstra import shortest_path_tree, walk_back
from .routes import Routes

__all__ = ["Routes", "shortest_path_tree", "walk_back"]
