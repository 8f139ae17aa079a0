"""Shortest-trip computation using Dijkstra's algorithm.

The search starts from every line serving the departure station at
once and stops at the first vertex settled at the arrival station.
All per-query bookkeeping lives in a SearchState, so one graph can
answer any number of queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..domain.errors import NoRouteFoundError
from ..domain.models import LinkKind, RouteResult, Vertex
from .network import TransitGraph
from .queue import TravelTimeQueue
from .reconstruct import reconstruct_route


@dataclass
class SearchState:
    """Per-query search bookkeeping.

    A vertex absent from ``times`` has not been reached yet. Seeded
    origins are present in ``times`` but absent from ``previous``.
    """

    start: str
    dest: str
    times: Dict[Vertex, int] = field(default_factory=dict)
    previous: Dict[Vertex, Tuple[Vertex, LinkKind]] = field(default_factory=dict)
    terminal: Optional[Vertex] = None
    settled: int = 0

    @property
    def reached(self) -> bool:
        return self.terminal is not None


def dijkstra(graph: TransitGraph, start: str, dest: str) -> SearchState:
    """Run a multi-source, single-sink Dijkstra search.

    Parameters
    ----------
    graph:
        Transit network as produced by ``build_graph``.
    start:
        Name of the departure station. Every line serving it is an
        origin at cost 0.
    dest:
        Name of the arrival station. Any line serving it will do.

    Returns
    -------
    SearchState
        The search bookkeeping. ``terminal`` is the first vertex settled
        at ``dest``, or None if no vertex at ``dest`` is reachable.
    """
    state = SearchState(start=start, dest=dest)
    queue = TravelTimeQueue()

    for vertex in graph.vertices_at(start):
        state.times[vertex] = 0
        queue.push(vertex, 0)

    while queue:
        current, current_time = queue.pop()
        state.settled += 1

        if current.station == dest:
            state.terminal = current
            break

        for edge in graph.edges_from(current):
            candidate = current_time + edge.minutes
            known = state.times.get(edge.target)
            if known is None or candidate < known:
                state.times[edge.target] = candidate
                state.previous[edge.target] = (current, edge.kind)
                queue.decrease_key(edge.target, candidate)

    return state


def shortest_route(graph: TransitGraph, start: str, dest: str) -> RouteResult:
    """Compute the fastest route between two stations.

    Returns the empty RouteResult when ``start == dest`` without running
    a search.

    Raises:
        NoRouteFoundError: If no vertex at ``dest`` can be reached.
    """
    if start == dest:
        return RouteResult()

    state = dijkstra(graph, start, dest)
    if state.terminal is None:
        raise NoRouteFoundError(
            f"No route found from {start} to {dest}",
            departure=start,
            arrival=dest,
        )
    return reconstruct_route(state, state.terminal)
