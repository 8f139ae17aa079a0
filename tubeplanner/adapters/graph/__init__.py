"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVNetworkRepository: Loads the transit network from CSV files
- DijkstraRouteSolver: Finds the fastest route using Dijkstra's algorithm
"""

from .csv_repository import CSVNetworkRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVNetworkRepository", "DijkstraRouteSolver"]
