"""Graph representation and path-finding.

This subpackage holds the in-memory weighted directed graph and the
Dijkstra search that runs on top of it.
"""

from .adjacency import AdjacencyListGraph, EdgeSource, WeightedDirectedGraph
from .dijkstra import build_graph, dijkstra, shortest_path

__all__ = [
    "AdjacencyListGraph",
    "EdgeSource",
    "WeightedDirectedGraph",
    "build_graph",
    "dijkstra",
    "shortest_path",
]
