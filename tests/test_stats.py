"""Unit tests for igraph-backed graph statistics."""

from cyclefinder.graph.cycle_finder import smallest_cycle
from cyclefinder.graph.stats import graph_stats, to_igraph
from cyclefinder.graph.store import AdjacencyGraph


class TestToIgraph:
    """Conversion to igraph."""

    def test_edges_and_weights(self, triangle):
        g = to_igraph(triangle)
        assert g.is_directed()
        assert g.vcount() == 3
        assert sorted(g.get_edgelist()) == [(0, 1), (1, 2), (2, 0)]
        assert g.es["weight"] == [1.0, 1.0, 1.0]


class TestGraphStats:
    """Summary values."""

    def test_triangle(self, triangle):
        stats = graph_stats(triangle)
        assert stats["vertices"] == 3
        assert stats["edges"] == 3
        assert stats["is_dag"] is False
        assert stats["strong_component_count"] == 1
        assert stats["cyclic_component_count"] == 1
        assert stats["total_weight"] == 3.0

    def test_dag_agrees_with_finder(self, path_graph):
        stats = graph_stats(path_graph)
        assert stats["is_dag"] is True
        assert smallest_cycle(path_graph) == 0

    def test_two_cycles_components(self, two_cycles):
        stats = graph_stats(two_cycles)
        assert stats["weak_component_count"] == 2
        assert stats["cyclic_component_count"] == 2

    def test_self_loop_counted(self):
        stats = graph_stats(AdjacencyGraph.from_edges(1, [(0, 0, 2.5)]))
        assert stats["self_loops"] == 1
        assert stats["is_dag"] is False

    def test_empty_graph(self):
        stats = graph_stats(AdjacencyGraph.from_edges(0, []))
        assert stats["vertices"] == 0
        assert stats["edges"] == 0
        assert stats["max_indegree"] == 0
