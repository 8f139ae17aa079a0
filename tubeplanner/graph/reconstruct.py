"""Route reconstruction from a finished search."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..domain.models import LinkKind, RouteResult, Vertex

if TYPE_CHECKING:
    from .search import SearchState


def reconstruct_route(state: SearchState, terminal: Vertex) -> RouteResult:
    """Walk predecessor links from ``terminal`` back to a seeded origin.

    The origin is the first vertex of the route and has no leading link
    kind, so the result always holds one more vertex than link kinds.
    """
    vertices: List[Vertex] = [terminal]
    kinds: List[LinkKind] = []

    current = terminal
    while current in state.previous:
        current, kind = state.previous[current]
        vertices.append(current)
        kinds.append(kind)

    vertices.reverse()
    kinds.reverse()
    return RouteResult(
        vertices=tuple(vertices),
        kinds=tuple(kinds),
        times=tuple(state.times[vertex] for vertex in vertices),
    )
