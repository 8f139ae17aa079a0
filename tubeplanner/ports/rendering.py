"""Rendering port - Abstraction for turning routes into directions.

This protocol defines the contract for narrating a computed route,
allowing different presentations to be plugged into the service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult


class DirectionsRendererPort(Protocol):
    """Port for directions rendering.

    Implementation: adapters/rendering/text_directions.py
    """

    def render(self, route: RouteResult) -> str:
        """Render a route as human-readable directions.

        Args:
            route: The computed route; empty when no travel is needed.

        Returns:
            The directions text.
        """
        ...
