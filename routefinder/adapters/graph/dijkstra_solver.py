"""Dijkstra Route Solver adapter.

This adapter wraps the Dijkstra search behind RouteSolverPort and adds
logging of every solved query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import Label, Route
from ...graph.adjacency import WeightedDirectedGraph
from ...graph.dijkstra import dijkstra


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: WeightedDirectedGraph,
        start: Label,
        end: Label,
    ) -> Optional[Route]:
        """Find the cheapest route between two labels.

        Args:
            graph: The graph to search.
            start: Label to leave from.
            end: Label to reach.

        Returns:
            The cheapest route, or None when there is none. Unknown labels
            and unreachable labels give the same None.
        """
        route = dijkstra(graph, start, end)

        if route is None:
            self._logger.debug(
                "No route found",
                extra={"start": start, "end": end},
            )
            return None

        self._logger.debug(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "stops": len(route.path),
                "weight": route.total_weight,
            },
        )
        return route
