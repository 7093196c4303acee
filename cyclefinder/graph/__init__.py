from cyclefinder.graph.cycle_finder import CycleResult, find_shortest_cycle, smallest_cycle
from cyclefinder.graph.dijkstra import ShortestPaths, shortest_distances, shortest_paths
from cyclefinder.graph.store import AdjacencyGraph

__all__ = [
    "AdjacencyGraph",
    "CycleResult",
    "ShortestPaths",
    "find_shortest_cycle",
    "shortest_distances",
    "shortest_paths",
    "smallest_cycle",
]
