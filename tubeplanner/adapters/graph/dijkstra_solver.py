"""Dijkstra Route Solver adapter.

This adapter wraps the graph search and adds:
- Station validation with typed errors
- An explicit no-route outcome
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError, StationNotFoundError
from ...domain.models import RouteResult
from ...graph.network import TransitGraph
from ...graph.search import shortest_route


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            RouteResult with vertices, link kinds and cumulative times.
            Empty when departure and arrival are the same station.

        Raises:
            StationNotFoundError: If departure or arrival not in graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        # Validate inputs
        if not graph.has_station(departure):
            raise StationNotFoundError(
                f"{departure} is not a valid initial station",
                station_name=departure,
                role="initial",
            )
        if not graph.has_station(arrival):
            raise StationNotFoundError(
                f"{arrival} is not a valid destination",
                station_name=arrival,
                role="destination",
            )

        try:
            route = shortest_route(graph, departure, arrival)
        except NoRouteFoundError:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise

        if route.is_empty:
            self._logger.info("Already at destination", extra={"station": departure})
            return route

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": route.num_stops,
                "minutes": route.total_minutes,
                "transfers": route.transfer_count,
            },
        )
        return route
