"""Services layer - Application orchestration.

Available services:
- TripPlannerService: Plans trips and renders directions
"""

from .trip_planner import TripPlannerService

__all__ = ["TripPlannerService"]
