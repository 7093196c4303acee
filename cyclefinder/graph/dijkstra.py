"""
Single-source shortest paths over a dense adjacency matrix
  * shortest_paths
      - Dijkstra with a linear-scan minimum, O(V^2) per source
  * shortest_distances
      - Distance vector only
"""

from typing import List, NamedTuple

import numpy as np

from cyclefinder.errors import VertexOutOfRangeError
from cyclefinder.graph.store import AdjacencyGraph

UNREACHABLE = np.inf
NO_PREDECESSOR = -1


class ShortestPaths(NamedTuple):
    """
    Result of one Dijkstra run

    Attributes
    ----------
    source : int
        Source vertex
    distances : np.ndarray
        float64 distance per vertex, ``inf`` when unreachable
    predecessors : np.ndarray
        int64 previous vertex on the shortest path, -1 for the source
        and unreachable vertices
    """
    source: int
    distances: np.ndarray
    predecessors: np.ndarray

    def reachable(self, target: int) -> bool:
        return bool(np.isfinite(self.distances[target]))

    def path_to(self, target: int) -> List[int]:
        """Vertices from source to target inclusive, [] if unreachable"""
        if not self.reachable(target):
            return []

        path = [target]
        node = target
        while node != self.source:
            node = int(self.predecessors[node])
            path.append(node)
        path.reverse()
        return path


def shortest_paths(graph: AdjacencyGraph, source: int) -> ShortestPaths:
    """
    Parameters
    ----------
    graph : AdjacencyGraph
        weight matrix, 0 meaning "no edge"
    source : int
        source vertex

    Returns
    -------
    ShortestPaths
        fresh distance and predecessor vectors owned by the caller

    Notes
    -----
    Selection picks the unvisited vertex with the smallest tentative
    distance; among equal distances the lowest index wins (np.argmin
    returns the first occurrence). A relaxation only replaces a distance
    that is strictly larger.
    """
    n = graph.vertex_count
    if not graph.contains(source):
        raise VertexOutOfRangeError(f"Source {source} outside [0, {n})")

    weights = graph.matrix

    # ---------- 1. Initialise ----------
    dist = np.full(n, UNREACHABLE, dtype=np.float64)
    parent = np.full(n, NO_PREDECESSOR, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    dist[source] = 0.0

    # ---------- 2. Settle V-1 vertices ----------
    for _ in range(n - 1):
        tentative = np.where(visited, UNREACHABLE, dist)
        u = int(np.argmin(tentative))

        # every unvisited vertex is unreachable: nothing left to relax
        if not np.isfinite(tentative[u]):
            break

        visited[u] = True

        # ---------- 3. Relax outgoing edges of u ----------
        row = weights[u]
        candidate = dist[u] + row
        improved = ~visited & (row > 0) & (candidate < dist)
        dist[improved] = candidate[improved]
        parent[improved] = u

    return ShortestPaths(source, dist, parent)


def shortest_distances(graph: AdjacencyGraph, source: int) -> np.ndarray:
    """Distance vector from source, ``inf`` for unreachable vertices"""
    return shortest_paths(graph, source).distances
