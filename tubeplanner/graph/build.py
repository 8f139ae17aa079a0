"""Graph construction from connection records."""

from __future__ import annotations

import logging
from typing import Iterable

from ..domain.models import Connection
from .network import TransitGraph

logger = logging.getLogger(__name__)


def build_graph(connections: Iterable[Connection]) -> TransitGraph:
    """Materialise a TransitGraph from rail links and interchanges.

    Parameters
    ----------
    connections:
        Rail links and interchanges in any order. Vertices are created
        the first time a (station, line) pair is seen.

    Returns
    -------
    TransitGraph
        The populated network.

    Raises
    ------
    GraphError
        If a record has an unrecognised shape.
    """
    graph = TransitGraph()
    count = 0
    for connection in connections:
        graph.add_connection(connection)
        count += 1

    logger.debug(
        "Graph built",
        extra={
            "connections": count,
            "vertices": len(graph),
            "edges": graph.edge_count,
        },
    )
    return graph
