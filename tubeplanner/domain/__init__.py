"""Domain layer - Core network models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    GraphError,
    NoRouteFoundError,
    StationNotFoundError,
    TubePlannerError,
)
from .models import (
    Connection,
    Edge,
    Interchange,
    LinkKind,
    RailLink,
    RouteResult,
    Vertex,
)

__all__ = [
    # Models
    "Connection",
    "Edge",
    "Interchange",
    "LinkKind",
    "RailLink",
    "RouteResult",
    "Vertex",
    # Errors
    "TubePlannerError",
    "GraphError",
    "NoRouteFoundError",
    "StationNotFoundError",
]
