# cyclefinder/graph/store.py
"""
Dense weighted adjacency store

-----------------------------
Purpose:
    - Hold the V x V weight matrix of a directed graph
    - Edge insertion with bounds checking (last write wins)
    - Freeze the matrix once built so it can be shared read-only
      between shortest-path runs

Notes
-----
A weight of 0 means "no edge". A zero-weight edge read from input
therefore behaves exactly as if it were absent.
"""

import logging
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from cyclefinder.errors import GraphFrozenError, VertexOutOfRangeError

# Logger setup
log = logging.getLogger(__name__)

Edge = Tuple[int, int, float]


class AdjacencyGraph:
    """
    Directed graph backed by a dense numpy weight matrix

    Attributes
    ----------
    vertex_count : int
        Number of vertices V, fixed at construction
    strict : bool
        Raise on out-of-range endpoints instead of ignoring them
    frozen : bool
        Whether the matrix has been made read-only
    """

    def __init__(self, vertex_count: int, strict: bool = False) -> None:
        """
        Allocate a V x V matrix of zeros

        Parameters
        ----------
        vertex_count : int
            Number of vertices
        strict : bool, default False
            Reject out-of-range edge endpoints with VertexOutOfRangeError

        Raises
        ------
        ValueError
            If vertex_count is negative
        """
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")

        self.vertex_count = int(vertex_count)
        self.strict = strict
        self._matrix = np.zeros((self.vertex_count, self.vertex_count), dtype=np.float64)

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Edge],
        strict: bool = False
    ) -> "AdjacencyGraph":
        """
        Build a frozen graph from ``(u, v, weight)`` triples

        Parameters
        ----------
        vertex_count : int
            Number of vertices
        edges : Iterable[Tuple[int, int, float]]
            Directed edges; a later triple for the same (u, v) overwrites
        strict : bool, default False
            Reject out-of-range endpoints

        Returns
        -------
        AdjacencyGraph
            Frozen graph
        """
        graph = cls(vertex_count, strict=strict)
        for u, v, weight in edges:
            graph.add_edge(u, v, weight)
        return graph.freeze()

    @property
    def frozen(self) -> bool:
        return not self._matrix.flags.writeable

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the weight matrix"""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def contains(self, vertex: int) -> bool:
        return 0 <= vertex < self.vertex_count

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """
        Set ``graph[u][v] = weight``

        Out-of-range endpoints are ignored unless the graph is strict.
        The weight is not validated; input parsing guarantees it is >= 0.

        Raises
        ------
        GraphFrozenError
            If the graph has been frozen
        VertexOutOfRangeError
            If strict and u or v is outside [0, V)
        """
        if self.frozen:
            raise GraphFrozenError("Cannot add edges to a frozen graph")

        if not (self.contains(u) and self.contains(v)):
            if self.strict:
                raise VertexOutOfRangeError(
                    f"Edge {u} -> {v} outside vertex range [0, {self.vertex_count})"
                )
            log.debug("Ignoring edge %d -> %d: outside [0, %d)", u, v, self.vertex_count)
            return

        self._matrix[u, v] = weight

    def weight(self, u: int, v: int) -> float:
        """Stored weight of u -> v, 0.0 when there is no edge"""
        if not (self.contains(u) and self.contains(v)):
            raise VertexOutOfRangeError(
                f"Vertex pair ({u}, {v}) outside [0, {self.vertex_count})"
            )
        return float(self._matrix[u, v])

    def freeze(self) -> "AdjacencyGraph":
        """Make the matrix read-only and return self"""
        self._matrix.flags.writeable = False
        return self

    @property
    def edge_count(self) -> int:
        return int(np.count_nonzero(self._matrix > 0))

    def edges(self) -> Iterator[Edge]:
        """Yield ``(u, v, weight)`` for every positive weight, row-major"""
        rows, cols = np.nonzero(self._matrix > 0)
        for u, v in zip(rows.tolist(), cols.tolist()):
            yield u, v, float(self._matrix[u, v])

    def predecessors(self, v: int) -> List[int]:
        """Vertices u with an edge u -> v"""
        if not self.contains(v):
            raise VertexOutOfRangeError(f"Vertex {v} outside [0, {self.vertex_count})")
        return np.flatnonzero(self._matrix[:, v] > 0).tolist()

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        state = "frozen" if self.frozen else "mutable"
        return f"<AdjacencyGraph V={self.vertex_count} E={self.edge_count} {state}>"
