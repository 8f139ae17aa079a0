"""Trip planner service - Main orchestrator.

Loads the network, computes the fastest route and renders directions,
wiring the ports together with dependency injection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.models import RouteResult
from ..ports.graph import NetworkRepositoryPort, RouteSolverPort
from ..ports.rendering import DirectionsRendererPort


@dataclass
class TripPlannerService:
    """Main service for planning trips.

    This service orchestrates the full flow:
    1. Network loading
    2. Route computation
    3. Directions rendering

    Attributes:
        network_repository: Loads the transit network
        route_solver: Computes fastest routes
        renderer: Turns routes into directions
    """

    network_repository: NetworkRepositoryPort
    route_solver: RouteSolverPort
    renderer: DirectionsRendererPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(self, start: str, destination: str) -> RouteResult:
        """Compute the fastest route between two stations.

        Args:
            start: Departure station name.
            destination: Arrival station name.

        Returns:
            RouteResult, empty when start equals destination.

        Raises:
            GraphError: If the network cannot be loaded.
            StationNotFoundError: If either station is unknown.
            NoRouteFoundError: If no path exists between the stations.
        """
        self._logger.info(
            "Planning trip",
            extra={"start": start, "destination": destination},
        )
        graph = self.network_repository.load()
        return self.route_solver.solve(graph, start, destination)

    def directions(self, start: str, destination: str) -> str:
        """Plan a trip and render it as numbered directions.

        Nothing is rendered unless planning succeeds.
        """
        route = self.plan(start, destination)
        return self.renderer.render(route)
