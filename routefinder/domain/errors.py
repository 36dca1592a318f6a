"""Typed domain errors for routefinder.

The search core never raises: a missing route is a normal ``None``
result. These errors belong to the layers around it (reading graph and
journey files, configuration) and let the command line report failures
without a traceback.

All errors inherit from RouteFinderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteFinderError(Exception):
    """Base error for the routefinder domain.

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
class GraphError(RouteFinderError):
    """Graph file could not be read or decoded.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class JourneyError(RouteFinderError):
    """Journeys file could not be read or decoded.

    Attributes:
        file_path: Path to the journeys file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RouteFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
