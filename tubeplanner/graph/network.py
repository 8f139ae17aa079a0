"""In-memory transit network.

This module defines the TransitGraph type used throughout the project.
Each vertex is a (station, line) pair, so changing lines is an explicit
edge with its own travel time.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Sequence

from ..domain.errors import GraphError
from ..domain.models import Connection, Edge, Interchange, LinkKind, RailLink, Vertex


class TransitGraph:
    """Undirected, weighted, multi-layer transit graph.

    Vertices are indexed by station name then line name. Adjacency lists
    are owned by the graph and never change once the network is loaded.
    """

    def __init__(self) -> None:
        self._index: Dict[str, Dict[str, Vertex]] = {}
        self._adjacency: Dict[Vertex, List[Edge]] = {}

    def __contains__(self, station: object) -> bool:
        return station in self._index

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of stored (directed) edges, two per connection."""
        return sum(len(edges) for edges in self._adjacency.values())

    def has_station(self, station: str) -> bool:
        return station in self._index

    def has_vertex(self, station: str, line: str) -> bool:
        return line in self._index.get(station, {})

    def get_vertex(self, station: str, line: str) -> Vertex:
        try:
            return self._index[station][line]
        except KeyError:
            raise KeyError(f"No vertex for {station!r} on {line!r}") from None

    def vertices_at(self, station: str) -> List[Vertex]:
        """Return every vertex at a station, one per line serving it."""
        return list(self._index.get(station, {}).values())

    def stations(self) -> List[str]:
        return sorted(self._index)

    def edges_from(self, vertex: Vertex) -> Sequence[Edge]:
        return self._adjacency.get(vertex, ())

    def _vertex(self, station: str, line: str) -> Vertex:
        lines = self._index.setdefault(station, {})
        vertex = lines.get(line)
        if vertex is None:
            vertex = Vertex(station=station, line=line)
            lines[line] = vertex
            self._adjacency[vertex] = []
        return vertex

    def add_connection(self, connection: Connection) -> None:
        """Add a rail link or interchange as a pair of opposite edges.

        Raises:
            GraphError: If the record is neither a RailLink nor an Interchange.
        """
        if isinstance(connection, RailLink):
            station_a, line_a = connection.from_station, connection.line
            station_b, line_b = connection.to_station, connection.line
            kind = LinkKind.RAIL
        elif isinstance(connection, Interchange):
            station_a, line_a = connection.from_station, connection.from_line
            station_b, line_b = connection.to_station, connection.to_line
            kind = connection.kind
        else:
            raise GraphError(
                "Connection must be a RailLink or an Interchange, "
                f"got {type(connection).__name__}"
            )

        vertex_a = self._vertex(station_a, line_a)
        vertex_b = self._vertex(station_b, line_b)
        self._adjacency[vertex_a].append(Edge(vertex_b, connection.minutes, kind))
        self._adjacency[vertex_b].append(Edge(vertex_a, connection.minutes, kind))
