"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for reading graphs and journey
queries from storage and for computing routes between labels.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Journey, Label, Route
    from ..graph.adjacency import WeightedDirectedGraph

# A journey query: (from label, to label)
JourneyQuery = Tuple[int, int]


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/json_repository.py

    The repository is responsible for loading and caching the graph
    from persistent storage.
    """

    def load(self) -> WeightedDirectedGraph:
        """Load the graph.

        Returns:
            The graph, built once and reused on later calls.
        """
        ...


class JourneyRepositoryPort(Protocol):
    """Port for reading journey queries and encoding answered journeys."""

    def load(self) -> Sequence[JourneyQuery]:
        """Load the journey queries.

        Returns:
            The (from, to) pairs in file order.
        """
        ...

    def dump(self, journeys: Sequence[Journey]) -> str:
        """Encode answered journeys.

        Args:
            journeys: Journeys in query order.

        Returns:
            The encoded document.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py
    """

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
            The cheapest route, or None if there is none.
        """
        ...
