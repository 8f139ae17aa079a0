"""Rendering adapters - Implementations of DirectionsRendererPort.

Available implementations:
- TextDirectionsRenderer: Numbered plain-text directions
"""

from .text_directions import TextDirectionsRenderer

__all__ = ["TextDirectionsRenderer"]
