"""Graph ports - Abstractions for network loading and routing.

These protocols define the contracts for graph operations, including
loading the transit network and computing the fastest route.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Connection, RouteResult
    from ..graph.network import TransitGraph


class NetworkRepositoryPort(Protocol):
    """Port for loading the transit network.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the network
    from its dataset.
    """

    def load_connections(self) -> List[Connection]:
        """Load every rail link and interchange record."""
        ...

    def load(self) -> TransitGraph:
        """Load the transit graph.

        Returns:
            The graph built from all connection records.
        """
        ...

    def list_stations(self) -> Sequence[str]:
        """List all station names in the network."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: TransitGraph,
        departure: str,
        arrival: str,
    ) -> RouteResult:
        """Find the fastest route between two stations.

        Args:
            graph: The transit network.
            departure: Departure station name.
            arrival: Arrival station name.

        Returns:
            RouteResult, empty when departure equals arrival.
        """
        ...
