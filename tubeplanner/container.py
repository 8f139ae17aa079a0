"""Dependency injection container.

Ports are bound to factories; the CLI resolves ``TripPlannerService``
from the default container and tests swap in fakes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Maps port types to factories and caches singleton instances.

    Usage:
        container = Container.create_default()
        planner = container.resolve(TripPlannerService)
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _transient: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding."""
        self._factories[port_type] = factory
        self._singletons.pop(port_type, None)
        if singleton:
            self._transient.discard(port_type)
        else:
            self._transient.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")
        if port_type in self._transient:
            return self._factories[port_type]()
        if port_type not in self._singletons:
            self._singletons[port_type] = self._factories[port_type]()
        return self._singletons[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Wire the CSV repository, Dijkstra solver and text renderer."""
        from .adapters.graph import CSVNetworkRepository, DijkstraRouteSolver
        from .adapters.rendering import TextDirectionsRenderer
        from .ports.graph import NetworkRepositoryPort, RouteSolverPort
        from .ports.rendering import DirectionsRendererPort
        from .services import TripPlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkRepositoryPort,
            lambda: CSVNetworkRepository(config.graph),
        )
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(DirectionsRendererPort, TextDirectionsRenderer)
        container.register(
            TripPlannerService,
            lambda: TripPlannerService(
                network_repository=container.resolve(NetworkRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                renderer=container.resolve(DirectionsRendererPort),
            ),
        )
        return container


_default_container: Optional[Container] = None


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _default_container
    if _default_container is None:
        _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Drop the process-wide container so the next call rebuilds it."""
    global _default_container
    _default_container = None
