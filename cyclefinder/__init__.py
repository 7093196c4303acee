"""Minimum-weight directed cycle detection over dense weighted graphs"""

from cyclefinder.graph.cycle_finder import CycleResult, find_shortest_cycle, smallest_cycle
from cyclefinder.graph.store import AdjacencyGraph

__all__ = ["AdjacencyGraph", "CycleResult", "find_shortest_cycle", "smallest_cycle"]
