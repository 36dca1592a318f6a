"""Journey planner service - Batch orchestration of route queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from ..domain.models import Journey, Label
from ..ports.graph import GraphRepositoryPort, JourneyQuery, RouteSolverPort


@dataclass
class JourneyPlannerService:
    """Answers journey queries against one graph.

    The graph is loaded through the repository on first use and shared by
    every query; each query gets its own independent search.

    Attributes:
        graph_repository: Loads the graph
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan_one(self, start: Label, end: Label) -> Journey:
        """Answer a single query.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        graph = self.graph_repository.load()
        route = self.route_solver.solve(graph, start, end)
        path = route.path if route is not None else None
        return Journey(start=start, end=end, route=path)

    def plan(self, queries: Iterable[JourneyQuery]) -> List[Journey]:
        """Answer queries in order.

        Args:
            queries: (from, to) pairs.

        Returns:
            One Journey per query, in the same order. Journeys without a
            route carry ``route=None``.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        journeys = [self.plan_one(start, end) for start, end in queries]
        found = sum(1 for journey in journeys if journey.is_found)
        self._logger.info(
            "Journeys planned",
            extra={"journeys": len(journeys), "found": found},
        )
        return journeys
