"""Typed domain errors for the trip planner.

All errors inherit from TubePlannerError and can optionally wrap a
root cause exception for debugging. The CLI is the only layer that
turns them into messages and exit codes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TubePlannerError(Exception):
    """Base error for the trip planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(TubePlannerError):
    """Network dataset or graph integrity error.

    Raised for unreadable or malformed dataset files and for connection
    records of an unrecognised shape.

    Attributes:
        file_path: Path to the dataset file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class StationNotFoundError(TubePlannerError):
    """Station name not found in the network.

    Attributes:
        station_name: The station name that was not found
        role: Either "initial" or "destination"
    """

    station_name: str = ""
    role: str = ""


@dataclass
class NoRouteFoundError(TubePlannerError):
    """Both stations exist but no path connects them.

    Attributes:
        departure: Departure station name
        arrival: Arrival station name
    """

    departure: str = ""
    arrival: str = ""
