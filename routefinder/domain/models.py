"""Immutable domain models for route finding.

All models are frozen and carry no external dependencies. They describe
the graph vocabulary (labels, weights, edges) and the values produced by
a search (routes and answered journeys).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

Label = int
Weight = int


class Edge(NamedTuple):
    """Directed arc from an implicit source to ``label`` costing ``weight``."""

    label: Label
    weight: Weight


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A fully specified edge as supplied to graph construction.

    Attributes:
        source: Label the edge leaves from
        destination: Label the edge arrives at
        weight: Non-negative cost of traversing the edge
    """

    source: Label
    destination: Label
    weight: Weight


@dataclass(frozen=True, slots=True)
class Route:
    """A candidate path: a start label and the edges taken from it.

    Routes order by total weight only so that ``heapq`` pops the cheapest
    route first. Equal weights compare neither less nor greater; the heap
    resolves such ties however it likes.

    Attributes:
        start_label: Label the route leaves from
        edges: Edges traversed so far, in order
        total_weight: Sum of the edge weights
    """

    start_label: Label
    edges: tuple[Edge, ...] = ()
    total_weight: Weight = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "total_weight", sum(edge.weight for edge in self.edges)
        )

    def __lt__(self, other: Route) -> bool:
        return self.total_weight < other.total_weight

    @property
    def end_label(self) -> Label:
        """Destination of the last edge, or the start for an empty route."""
        if not self.edges:
            return self.start_label
        return self.edges[-1].label

    @property
    def path(self) -> tuple[Label, ...]:
        """Start label followed by every edge destination."""
        return (self.start_label,) + tuple(edge.label for edge in self.edges)

    def extend(self, edge: Edge) -> Route:
        """Return a new route with ``edge`` appended."""
        return Route(self.start_label, self.edges + (edge,))


@dataclass(frozen=True, slots=True)
class Journey:
    """An answered query between two labels.

    Attributes:
        start: Label the journey leaves from
        end: Label the journey should reach
        route: Labels of the cheapest path, or None when there is no route
    """

    start: Label
    end: Label
    route: Optional[tuple[Label, ...]] = None

    @property
    def is_found(self) -> bool:
        """Check if a route was found."""
        return self.route is not None
