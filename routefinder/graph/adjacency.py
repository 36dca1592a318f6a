"""Weighted directed graphs.

This module defines the graph interface the search runs against and the
adjacency-list implementation built from a flat list of edge records.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    AbstractSet,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
)

from ..domain.models import Edge, Label, Weight

if TYPE_CHECKING:
    from ..domain.models import Route

logger = logging.getLogger(__name__)


class EdgeSource(Protocol):
    """Anything that describes one directed, weighted edge."""

    @property
    def source(self) -> Label: ...

    @property
    def destination(self) -> Label: ...

    @property
    def weight(self) -> Weight: ...


class WeightedDirectedGraph(ABC):
    """Read-only weighted directed graph.

    Subclasses only answer ``outgoing``; edge filtering and the
    shortest-path search are built on top of it, so the storage strategy
    stays independent from the algorithm.
    """

    @abstractmethod
    def outgoing(self, label: Label) -> Optional[Sequence[Edge]]:
        """Return the outgoing edges of ``label``.

        Returns:
            The edges in assembly order, or None when the label has no
            recorded outgoing edges (including labels never seen).
        """

    def outgoing_unvisited(
        self, label: Label, visited: AbstractSet[Label]
    ) -> Optional[List[Edge]]:
        """Return the outgoing edges of ``label`` not leading into ``visited``.

        Returns None only when ``outgoing`` does. Edges that exist but all
        lead to visited labels give an empty list.
        """
        edges = self.outgoing(label)
        if edges is None:
            return None
        return [edge for edge in edges if edge.label not in visited]

    def dijkstra(self, start: Label, end: Label) -> Optional[Route]:
        """Cheapest route from ``start`` to ``end``, or None."""
        from .dijkstra import dijkstra

        return dijkstra(self, start, end)


class AdjacencyListGraph(WeightedDirectedGraph):
    """Graph stored as a mapping from label to its outgoing edges.

    Only labels with at least one outgoing edge are keys; a label that
    only ever appears as a destination is indistinguishable from an
    unknown one. Parallel edges are kept as they are.
    """

    __slots__ = ("_vertices",)

    def __init__(self, vertices: Dict[Label, List[Edge]]) -> None:
        self._vertices = vertices

    @classmethod
    def from_edges(cls, records: Iterable[EdgeSource]) -> AdjacencyListGraph:
        """Build a graph from edge records.

        Args:
            records: Edge records in any order.

        Returns:
            The assembled graph.
        """
        vertices: Dict[Label, List[Edge]] = {}
        edge_count = 0
        for record in records:
            vertices.setdefault(record.source, []).append(
                Edge(record.destination, record.weight)
            )
            edge_count += 1

        logger.debug(
            "Graph built",
            extra={"vertices": len(vertices), "edges": edge_count},
        )
        return cls(vertices)

    def outgoing(self, label: Label) -> Optional[Sequence[Edge]]:
        edges = self._vertices.get(label)
        if edges is None:
            return None
        return tuple(edges)

    @property
    def labels(self) -> frozenset[Label]:
        """Labels with at least one outgoing edge."""
        return frozenset(self._vertices)

    @property
    def edge_count(self) -> int:
        """Total number of edges, parallel edges included."""
        return sum(len(edges) for edges in self._vertices.values())

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self)}, "
            f"edges={self.edge_count})"
        )
