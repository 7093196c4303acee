"""
Pytest configuration and shared fixtures.

Graphs are returned frozen, as AdjacencyGraph.from_edges builds them.
"""

from pathlib import Path

import pytest

from cyclefinder.graph.store import AdjacencyGraph


@pytest.fixture
def triangle() -> AdjacencyGraph:
    """0 -> 1 -> 2 -> 0 with unit weights."""
    return AdjacencyGraph.from_edges(3, [(0, 1, 1), (1, 2, 1), (2, 0, 1)])


@pytest.fixture
def path_graph() -> AdjacencyGraph:
    """0 -> 1 -> 2, no edge back."""
    return AdjacencyGraph.from_edges(3, [(0, 1, 2), (1, 2, 3)])


@pytest.fixture
def two_cycles() -> AdjacencyGraph:
    """Disjoint cycles 0-1-2 (weight 12) and 3-4 (weight 7)."""
    return AdjacencyGraph.from_edges(5, [
        (0, 1, 4), (1, 2, 4), (2, 0, 4),
        (3, 4, 3), (4, 3, 4),
    ])


@pytest.fixture
def write_adjacency(tmp_path: Path):
    """Write adjacency lines to a temporary file and return its path."""
    def _write(*lines: str) -> Path:
        path = tmp_path / "graph.txt"
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return path
    return _write
