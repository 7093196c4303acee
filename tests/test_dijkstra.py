"""Unit tests for the single-source shortest-path engine."""

import numpy as np
import pytest

from cyclefinder.errors import VertexOutOfRangeError
from cyclefinder.graph.dijkstra import shortest_distances, shortest_paths
from cyclefinder.graph.store import AdjacencyGraph


class TestDistances:
    """Distance vectors."""

    def test_source_is_zero(self, triangle):
        assert shortest_distances(triangle, 1)[1] == 0.0

    def test_triangle_distances(self, triangle):
        assert shortest_distances(triangle, 0).tolist() == [0.0, 1.0, 2.0]

    def test_shorter_indirect_path_preferred(self):
        graph = AdjacencyGraph.from_edges(3, [(0, 2, 10), (0, 1, 1), (1, 2, 2)])
        assert shortest_distances(graph, 0)[2] == 3.0

    def test_unreachable_is_infinite(self, path_graph):
        dist = shortest_distances(path_graph, 2)
        assert np.isinf(dist[0])
        assert np.isinf(dist[1])

    def test_disconnected_component_unreachable(self, two_cycles):
        dist = shortest_distances(two_cycles, 3)
        assert dist[4] == 3.0
        assert np.isinf(dist[:3]).all()

    def test_zero_weight_edge_not_traversed(self):
        graph = AdjacencyGraph.from_edges(2, [(0, 1, 0)])
        assert np.isinf(shortest_distances(graph, 0)[1])

    def test_single_vertex(self):
        graph = AdjacencyGraph.from_edges(1, [(0, 0, 2.5)])
        assert shortest_distances(graph, 0).tolist() == [0.0]

    def test_source_out_of_range(self, triangle):
        with pytest.raises(VertexOutOfRangeError):
            shortest_paths(triangle, 3)

    def test_graph_unchanged(self, triangle):
        before = triangle.matrix.copy()
        shortest_paths(triangle, 0)
        assert np.array_equal(before, triangle.matrix)


class TestPaths:
    """Predecessor tracking."""

    def test_path_to(self):
        graph = AdjacencyGraph.from_edges(4, [(0, 1, 1), (1, 2, 1), (0, 2, 5), (2, 3, 1)])
        assert shortest_paths(graph, 0).path_to(3) == [0, 1, 2, 3]

    def test_path_to_source(self, triangle):
        assert shortest_paths(triangle, 2).path_to(2) == [2]

    def test_path_to_unreachable(self, path_graph):
        assert shortest_paths(path_graph, 1).path_to(0) == []

    def test_equal_paths_keep_first_found(self):
        # 0->1->3 and 0->2->3 both weigh 2; vertex 1 settles first
        graph = AdjacencyGraph.from_edges(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])
        assert shortest_paths(graph, 0).path_to(3) == [0, 1, 3]
