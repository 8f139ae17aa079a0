"""Graph-related utilities for representing the transit network.

This subpackage contains modules to build an in-memory multi-layer
graph from connection records and to find the fastest trip on it.
"""

from .build import build_graph
from .network import TransitGraph
from .reconstruct import reconstruct_route
from .search import SearchState, dijkstra, shortest_route

__all__ = [
    "SearchState",
    "TransitGraph",
    "build_graph",
    "dijkstra",
    "reconstruct_route",
    "shortest_route",
]
