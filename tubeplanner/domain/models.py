"""Immutable domain models for the trip planner.

All models are frozen dataclasses with slots. They have no external
dependencies and describe the transit network and computed routes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class LinkKind(Enum):
    """Kind of connection traversed between two vertices."""

    RAIL = "rail"
    LINE_INTERCHANGE = "line interchange"
    STATION_INTERCHANGE = "station interchange"

    @property
    def is_interchange(self) -> bool:
        return self is not LinkKind.RAIL


@dataclass(frozen=True, slots=True)
class Vertex:
    """A position in the network: one station served by one line.

    Attributes:
        station: Station name (e.g. 'Paddington')
        line: Line name (e.g. 'Bakerloo')
    """

    station: str
    line: str

    def __str__(self) -> str:
        return f"{self.station} ({self.line})"


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing connection from a vertex.

    Attributes:
        target: Vertex reached by following this edge
        minutes: Travel time in minutes
        kind: Rail link, line interchange or station interchange
    """

    target: Vertex
    minutes: int
    kind: LinkKind


@dataclass(frozen=True, slots=True)
class RailLink:
    """Travel between two adjacent stops on the same line."""

    from_station: str
    to_station: str
    line: str
    minutes: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValueError(
                f"Travel time must be non-negative, got {self.minutes}"
            )


@dataclass(frozen=True, slots=True)
class Interchange:
    """Transfer between two lines, at one station or on foot between two.

    An interchange whose endpoints share a station name is a line
    interchange; otherwise it is a station interchange.
    """

    from_station: str
    from_line: str
    to_station: str
    to_line: str
    minutes: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValueError(
                f"Travel time must be non-negative, got {self.minutes}"
            )

    @property
    def kind(self) -> LinkKind:
        if self.from_station == self.to_station:
            return LinkKind.LINE_INTERCHANGE
        return LinkKind.STATION_INTERCHANGE


Connection = Union[RailLink, Interchange]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two stations.

    ``kinds[i]`` is the kind of the edge leading from ``vertices[i]`` to
    ``vertices[i + 1]`` and ``times[i]`` is the cumulative travel time on
    arrival at ``vertices[i]``. The empty result means the trip starts
    and ends at the same station.

    Attributes:
        vertices: Ordered vertices from start to destination inclusive
        kinds: Kind of each traversed edge
        times: Cumulative minutes at each vertex
    """

    vertices: tuple[Vertex, ...] = field(default_factory=tuple)
    kinds: tuple[LinkKind, ...] = field(default_factory=tuple)
    times: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.vertices and len(self.vertices) != len(self.kinds) + 1:
            raise ValueError(
                f"Route with {len(self.vertices)} vertices needs "
                f"{len(self.vertices) - 1} link kinds, got {len(self.kinds)}"
            )
        if len(self.times) != len(self.vertices):
            raise ValueError(
                f"Route with {len(self.vertices)} vertices needs as many "
                f"times, got {len(self.times)}"
            )

    @property
    def is_empty(self) -> bool:
        """Check if no travel is needed."""
        return len(self.vertices) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the route."""
        return len(self.vertices)

    @property
    def total_minutes(self) -> int:
        """Return the travel time on arrival at the destination."""
        return self.times[-1] if self.times else 0

    @property
    def transfer_count(self) -> int:
        """Return the number of interchanges along the route."""
        return sum(1 for kind in self.kinds if kind.is_interchange)

    @property
    def start(self) -> Vertex:
        return self.vertices[0]

    @property
    def destination(self) -> Vertex:
        return self.vertices[-1]
