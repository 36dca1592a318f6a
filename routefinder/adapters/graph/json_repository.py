"""JSON repositories for graphs and journeys.

These adapters read the graph and journey files described in
``documents.py`` and add:
- Configuration injection (paths from config)
- Caching of the built graph
- Typed errors wrapping I/O and decoding failures
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, JourneyError
from ...domain.models import Journey
from ...graph.adjacency import AdjacencyListGraph
from ...ports.graph import JourneyQuery
from .documents import EDGES, JOURNEYS, JourneyDocument


@dataclass
class JSONGraphRepository:
    """Graph repository that loads from a JSON edge list.

    Implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
        path: Explicit graph file, overrides the configured one
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[AdjacencyListGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph_path(self) -> Path:
        return self.path if self.path is not None else self.config.graph_path

    def load(self) -> AdjacencyListGraph:
        """Load the graph from its JSON file.

        Returns:
            The graph, cached after the first load.

        Raises:
            GraphError: If the file cannot be read or decoded.
        """
        if self._graph is not None:
            return self._graph

        path = self.graph_path
        self._logger.debug("Loading graph", extra={"graph_path": str(path)})

        try:
            records = EDGES.validate_json(path.read_bytes())
        except OSError as e:
            raise GraphError(
                f"Graph file {path} could not be read",
                file_path=str(path),
                cause=e,
            )
        except ValidationError as e:
            raise GraphError(
                f"Graph file {path} is not a valid edge list",
                file_path=str(path),
                cause=e,
            )

        graph = AdjacencyListGraph.from_edges(records)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": len(graph), "edges": len(records)},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")


@dataclass
class JSONJourneyRepository:
    """Reads journey queries from JSON and encodes answered journeys.

    Implements JourneyRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
        path: Explicit journeys file, overrides the configured one
        indent: Indentation of encoded output, None for a single line
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    indent: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def journeys_path(self) -> Path:
        return self.path if self.path is not None else self.config.journeys_path

    def load(self) -> List[JourneyQuery]:
        """Load journey queries.

        Returns:
            (from, to) pairs in file order. Any ``route`` already present
            in the file is ignored.

        Raises:
            JourneyError: If the file cannot be read or decoded.
        """
        path = self.journeys_path
        try:
            documents = JOURNEYS.validate_json(path.read_bytes())
        except OSError as e:
            raise JourneyError(
                f"Journeys file {path} could not be read",
                file_path=str(path),
                cause=e,
            )
        except ValidationError as e:
            raise JourneyError(
                f"Journeys file {path} is not a valid journey list",
                file_path=str(path),
                cause=e,
            )

        self._logger.info("Journeys loaded", extra={"journeys": len(documents)})
        return [(doc.start, doc.end) for doc in documents]

    def dump(self, journeys: Sequence[Journey]) -> str:
        """Encode answered journeys as a JSON array.

        Args:
            journeys: Journeys in query order.

        Returns:
            The JSON text; a missing route is encoded as null.
        """
        documents = [JourneyDocument.from_journey(j) for j in journeys]
        return JOURNEYS.dump_json(
            documents, by_alias=True, indent=self.indent
        ).decode("utf-8")
