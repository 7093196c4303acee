# cyclefinder/graph/cycle_finder.py
"""
Minimum-weight cycle detection

-----------------------------
Purpose:
    - Run Dijkstra from every vertex of a frozen AdjacencyGraph
    - Close each shortest-path tree with an edge back to its source
    - Keep the lightest closed walk as the shortest cycle

For source i and every j with an edge j -> i, ``dist_i[j] + w(j, i)`` is the
weight of a cycle i -> ... -> j -> i. A positive self-loop at i gives the
one-edge cycle of weight w(i, i).
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple, Optional

import numpy as np

from cyclefinder.errors import DeadlineExceededError
from cyclefinder.graph.dijkstra import shortest_paths
from cyclefinder.graph.store import AdjacencyGraph

NO_CYCLE = 0.0

# Logger setup
log = logging.getLogger(__name__)


class CycleResult(NamedTuple):
    """
    Shortest cycle of a graph

    Attributes
    ----------
    length : float
        Total weight, 0.0 when the graph has no cycle
    cycle : List[int]
        Vertices ``[i, ..., j, i]`` of one minimum cycle, empty if none
    """
    length: float
    cycle: List[int]

    @property
    def found(self) -> bool:
        return bool(self.cycle)

    @property
    def edge_count(self) -> int:
        return max(len(self.cycle) - 1, 0)


class _Candidate(NamedTuple):
    length: float
    source: int
    cycle: List[int]


def _cycle_through(graph: AdjacencyGraph, source: int) -> Optional[_Candidate]:
    """Lightest cycle whose shortest-path tree is rooted at source"""
    paths = shortest_paths(graph, source)
    closing = graph.matrix[:, source]

    usable = (closing > 0) & np.isfinite(paths.distances)
    if not usable.any():
        return None

    lengths = np.where(usable, paths.distances + closing, np.inf)
    j = int(np.argmin(lengths))
    return _Candidate(float(lengths[j]), source, paths.path_to(j) + [source])


def _check_deadline(deadline_at: Optional[float], source: int) -> None:
    if deadline_at is not None and time.monotonic() > deadline_at:
        raise DeadlineExceededError(
            f"Deadline exceeded before processing source vertex {source}"
        )


def find_shortest_cycle(
    graph: AdjacencyGraph,
    workers: int = 1,
    deadline: Optional[float] = None
) -> CycleResult:
    """
    Find the minimum-weight directed cycle

    Parameters
    ----------
    graph : AdjacencyGraph
        Graph to search; it is frozen first if still mutable
    workers : int, default 1
        Number of threads running the per-source searches
    deadline : Optional[float]
        Seconds allowed for the whole search, checked between sources

    Returns
    -------
    CycleResult
        Shortest cycle, or ``CycleResult(0.0, [])`` if there is none

    Raises
    ------
    DeadlineExceededError
        If the deadline passes before every source has been processed

    Notes
    -----
    Ties resolve to the lowest source and then the lowest closing vertex,
    so the reported cycle does not depend on ``workers``.
    """
    graph.freeze()
    n = graph.vertex_count
    deadline_at = None if deadline is None else time.monotonic() + deadline
    started = time.perf_counter()

    def search(source: int) -> Optional[_Candidate]:
        _check_deadline(deadline_at, source)
        return _cycle_through(graph, source)

    if workers > 1 and n > 1:
        log.debug("Searching %d sources on %d threads", n, workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            candidates = list(executor.map(search, range(n)))
    else:
        candidates = [search(source) for source in range(n)]

    best: Optional[_Candidate] = None
    for candidate in candidates:
        if candidate is not None and (best is None or candidate.length < best.length):
            best = candidate

    elapsed_ms = (time.perf_counter() - started) * 1000
    if best is None:
        log.info("No cycle found in %d vertices (%.1f ms)", n, elapsed_ms)
        return CycleResult(NO_CYCLE, [])

    log.info("Shortest cycle %g through %d edges from vertex %d (%.1f ms)",
             best.length, len(best.cycle) - 1, best.source, elapsed_ms)
    return CycleResult(best.length, best.cycle)


def smallest_cycle(graph: AdjacencyGraph) -> float:
    """Length of the shortest cycle, or 0.0 when the graph is acyclic or empty"""
    return find_shortest_cycle(graph).length
