"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import NetworkRepositoryPort, RouteSolverPort
from .rendering import DirectionsRendererPort

__all__ = [
    # Graph
    "NetworkRepositoryPort",
    "RouteSolverPort",
    # Rendering
    "DirectionsRendererPort",
]
