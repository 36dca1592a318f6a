"""Services layer - Application orchestration.

Available services:
- JourneyPlannerService: Answers batches of journey queries
"""

from .journey_planner import JourneyPlannerService

__all__ = ["JourneyPlannerService"]
