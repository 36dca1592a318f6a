"""Shortest-path computation using Dijkstra's algorithm.

The search is best-first over partial routes: the frontier holds whole
routes ordered by total weight, the cheapest is popped, and its end label
is finalized and expanded. ``heapq`` is a min-heap, so ``Route.__lt__``
compares weights directly and the cheapest route comes out first.

Several routes to the same label may sit in the frontier at once; no
decrease-key is done. The first one popped is the cheapest, and the
visited set keeps any label from being expanded twice.
"""

from __future__ import annotations

import heapq
import logging
from typing import Iterable, List, Optional, Set

from ..domain.models import Label, Route
from .adjacency import AdjacencyListGraph, EdgeSource, WeightedDirectedGraph

logger = logging.getLogger(__name__)


def dijkstra(
    graph: WeightedDirectedGraph, start: Label, end: Label
) -> Optional[Route]:
    """Compute the cheapest route between two labels.

    Parameters
    ----------
    graph:
        Any graph answering ``outgoing``.
    start:
        Label the route leaves from.
    end:
        Label the route must reach.

    Returns
    -------
    Route or None
        The minimum-weight route from ``start`` to ``end``. None when no
        route exists and when either label is unknown to the graph. A
        route always has at least one edge and ``start`` is finalized
        before the search begins, so ``start == end`` is never found,
        not even through a cycle or a self-loop.
    """
    visited: Set[Label] = {start}
    frontier: List[Route] = []

    seeds = graph.outgoing_unvisited(start, visited)
    if seeds is None:
        logger.debug("No outgoing edges", extra={"start": start, "end": end})
        return None
    for edge in seeds:
        heapq.heappush(frontier, Route(start, (edge,)))

    expanded = 0
    while frontier:
        cheapest = heapq.heappop(frontier)
        here = cheapest.end_label

        if here == end:
            logger.debug(
                "Route found",
                extra={
                    "start": start,
                    "end": end,
                    "weight": cheapest.total_weight,
                    "expanded": expanded,
                },
            )
            return cheapest

        if here in visited:
            # stale entry, a cheaper route already finalized this label
            continue
        visited.add(here)
        expanded += 1

        expansion = graph.outgoing_unvisited(here, visited)
        if expansion is None:
            continue
        for edge in expansion:
            heapq.heappush(frontier, cheapest.extend(edge))

    logger.debug(
        "No route found",
        extra={"start": start, "end": end, "expanded": expanded},
    )
    return None


def build_graph(edge_records: Iterable[EdgeSource]) -> AdjacencyListGraph:
    """Build an adjacency-list graph from edge records."""
    return AdjacencyListGraph.from_edges(edge_records)


def shortest_path(
    graph: WeightedDirectedGraph, start: Label, end: Label
) -> Optional[Route]:
    """Cheapest route from ``start`` to ``end``, or None if there is none."""
    return graph.dijkstra(start, end)
