"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    JourneyError,
    RouteFinderError,
)
from .models import Edge, EdgeRecord, Journey, Label, Route, Weight

__all__ = [
    # Models
    "Label",
    "Weight",
    "Edge",
    "EdgeRecord",
    "Route",
    "Journey",
    # Errors
    "RouteFinderError",
    "GraphError",
    "JourneyError",
    "ConfigurationError",
]
