"""Top-level package for the tube trip planner.

Builds a multi-layer graph of the transit network, where every vertex
is a (station, line) pair, finds the fastest trip between two stations
and narrates it as numbered directions.
"""

__version__ = "0.1.0"
