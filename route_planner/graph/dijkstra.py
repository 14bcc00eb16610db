"""Shortest-path computation using Dijkstra's algorithm.

Vertices are integer indices into a fixed candidate array and
predecessors are stored as an index array, so the search never holds
references to the city objects themselves.
"""

import heapq
import math
from typing import List, Optional, Sequence, Tuple

# adjacency[u] -> [(v, weight), ...]
Adjacency = Sequence[Sequence[Tuple[int, float]]]


def shortest_path_tree(
    adjacency: Adjacency,
    source: int,
    target: Optional[int] = None,
) -> Tuple[List[float], List[Optional[int]]]:
    """Run Dijkstra from ``source`` over a non-negative weighted graph.

    Parameters
    ----------
    adjacency:
        One neighbour list per vertex index.
    source:
        Index of the departure vertex.
    target:
        Optional index of the arrival vertex. The search stops as soon
        as its distance is settled.

    Returns
    -------
    list[float], list[int | None]
        Tentative distance and predecessor of every vertex. Unreached
        vertices keep ``inf`` and ``None``.

    Equal distances are settled in index order, so candidates inserted
    first win ties. Edges with a negative or non-finite weight are
    ignored.
    """
    count = len(adjacency)
    distances: List[float] = [math.inf] * count
    previous: List[Optional[int]] = [None] * count
    distances[source] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, source)]
    visited = [False] * count

    while heap:
        current_distance, u = heapq.heappop(heap)

        if visited[u]:
            continue

        visited[u] = True

        if u == target:
            break

        for v, weight in adjacency[u]:
            if visited[v] or not math.isfinite(weight) or weight < 0:
                continue
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return distances, previous


def walk_back(previous: Sequence[Optional[int]], source: int, target: int) -> List[int]:
    """Rebuild the vertex path from ``source`` to ``target``.

    Returns ``[source]`` when both are the same vertex and ``[]`` when
    ``target`` was never reached.
    """
    if source == target:
        return [source]
    if previous[target] is None:
        return []

    path: List[int] = []
    current: Optional[int] = target
    while current is not None:
        path.append(current)
        if current == source:
            break
        current = previous[current]

    if path[-1] != source:
        return []

    path.reverse()
    return path
