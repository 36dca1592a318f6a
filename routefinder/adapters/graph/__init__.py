"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- JSONGraphRepository: Loads a graph from a JSON edge list
- JSONJourneyRepository: Reads journey queries, encodes answers
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .json_repository import JSONGraphRepository, JSONJourneyRepository

__all__ = ["JSONGraphRepository", "JSONJourneyRepository", "DijkstraRouteSolver"]
