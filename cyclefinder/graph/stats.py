# cyclefinder/graph/stats.py
"""
Graph statistics

-----------------------------
Purpose:
    - Convert the dense store into an igraph.Graph
    - Summarise size, connectivity and degree information for display
"""

import logging
from typing import Any, Dict

from igraph import Graph

from cyclefinder.graph.store import AdjacencyGraph

# Logger setup
log = logging.getLogger(__name__)


def to_igraph(graph: AdjacencyGraph) -> Graph:
    """Directed igraph.Graph with the weights in the ``weight`` edge attribute"""
    edges = list(graph.edges())

    g = Graph(directed=True)
    g.add_vertices(graph.vertex_count)
    g.add_edges([(u, v) for u, v, _ in edges])
    g.es["weight"] = [w for _, _, w in edges]
    return g


def graph_stats(graph: AdjacencyGraph) -> Dict[str, Any]:
    """
    Get graph statistics

    Parameters
    ----------
    graph : AdjacencyGraph
        Graph to describe

    Returns
    -------
    Dict[str, Any]
        Graph statistics
    """
    g = to_igraph(graph)

    num_vertices = g.vcount()
    num_edges = g.ecount()
    self_loops = sum(1 for is_loop in g.is_loop() if is_loop)

    # Connectivity
    weak_sizes = g.components(mode="weak").sizes() if num_vertices else []
    strong_sizes = g.components(mode="strong").sizes() if num_vertices else []
    # a strongly connected component of two or more vertices holds a cycle
    cyclic_components = sum(1 for size in strong_sizes if size > 1)

    # Degree distribution
    indegrees = g.indegree()
    outdegrees = g.outdegree()

    stats = {
        "vertices": num_vertices,
        "edges": num_edges,
        "self_loops": self_loops,
        "density": g.density(loops=True) if num_vertices else 0.0,
        "is_dag": g.is_dag(),
        "weak_component_count": len(weak_sizes),
        "strong_component_count": len(strong_sizes),
        "cyclic_component_count": cyclic_components,
        "max_indegree": max(indegrees) if indegrees else 0,
        "max_outdegree": max(outdegrees) if outdegrees else 0,
        "total_weight": float(sum(g.es["weight"])) if num_edges else 0.0,
    }
    log.debug("Graph stats: %s", stats)
    return stats
