"""Top-level package for routefinder.

Least-cost paths between labeled vertices of a static weighted directed
graph. The core is ``build_graph`` plus ``shortest_path``; the rest of the
package reads JSON graphs and journey queries and answers them in batch.
"""

from .domain.models import Edge, EdgeRecord, Journey, Label, Route, Weight
from .graph import (
    AdjacencyListGraph,
    WeightedDirectedGraph,
    build_graph,
    dijkstra,
    shortest_path,
)

__all__ = [
    "AdjacencyListGraph",
    "Edge",
    "EdgeRecord",
    "Journey",
    "Label",
    "Route",
    "Weight",
    "WeightedDirectedGraph",
    "build_graph",
    "dijkstra",
    "shortest_path",
]
