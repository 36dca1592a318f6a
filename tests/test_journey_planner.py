import json
from dataclasses import dataclass, field
from typing import List

import pytest

from routefinder import EdgeRecord, build_graph
from routefinder.adapters.graph import (
    DijkstraRouteSolver,
    JSONGraphRepository,
    JSONJourneyRepository,
)
from routefinder.config import AppConfig, GraphConfig
from routefinder.container import Container
from routefinder.domain.errors import GraphError
from routefinder.domain.models import Journey
from routefinder.graph.adjacency import AdjacencyListGraph
from routefinder.ports.graph import (
    GraphRepositoryPort,
    JourneyRepositoryPort,
    RouteSolverPort,
)
from routefinder.services import JourneyPlannerService


@dataclass
class InMemoryGraphRepository:
    graph: AdjacencyListGraph
    loads: int = 0

    def load(self) -> AdjacencyListGraph:
        self.loads += 1
        return self.graph


@dataclass
class RecordingSolver:
    calls: List[tuple] = field(default_factory=list)
    inner: DijkstraRouteSolver = field(default_factory=DijkstraRouteSolver)

    def solve(self, graph, start, end):
        self.calls.append((start, end))
        return self.inner.solve(graph, start, end)


@pytest.fixture
def graph() -> AdjacencyListGraph:
    return build_graph(
        [
            EdgeRecord(1, 2, 1),
            EdgeRecord(2, 3, 1),
            EdgeRecord(3, 4, 1),
            EdgeRecord(2, 1, 1),
            EdgeRecord(1, 4, 4),
            EdgeRecord(5, 6, 1),
            EdgeRecord(6, 3, 1),
        ]
    )


def test_plan_answers_every_query_in_order(graph):
    solver = RecordingSolver()
    planner = JourneyPlannerService(InMemoryGraphRepository(graph), solver)

    journeys = planner.plan([(1, 4), (1, 5), (8, 9), (1, 2)])

    assert journeys == [
        Journey(1, 4, (1, 2, 3, 4)),
        Journey(1, 5, None),
        Journey(8, 9, None),
        Journey(1, 2, (1, 2)),
    ]
    assert solver.calls == [(1, 4), (1, 5), (8, 9), (1, 2)]


def test_plan_one(graph):
    planner = JourneyPlannerService(
        InMemoryGraphRepository(graph), DijkstraRouteSolver()
    )

    assert planner.plan_one(5, 4) == Journey(5, 4, (5, 6, 3, 4))
    assert not planner.plan_one(4, 5).is_found


def test_plan_empty_batch(graph):
    planner = JourneyPlannerService(
        InMemoryGraphRepository(graph), DijkstraRouteSolver()
    )

    assert planner.plan([]) == []


def test_plan_propagates_graph_errors(tmp_path):
    planner = JourneyPlannerService(
        JSONGraphRepository(GraphConfig(data_dir=tmp_path)), DijkstraRouteSolver()
    )

    with pytest.raises(GraphError):
        planner.plan([(1, 2)])


def test_solver_returns_none_for_unknown_labels(graph):
    assert DijkstraRouteSolver().solve(graph, 100, 200) is None


# Container


def test_container_singleton_and_transient():
    container = Container(config=AppConfig())
    container.register(RouteSolverPort, DijkstraRouteSolver)
    container.register(str, lambda: "x" * 3, singleton=False)

    assert container.resolve(RouteSolverPort) is container.resolve(RouteSolverPort)
    assert container.resolve(str) == "xxx"


def test_container_unregistered_type_raises():
    container = Container(config=AppConfig())

    with pytest.raises(KeyError):
        container.resolve(RouteSolverPort)


def test_container_clear_singletons():
    container = Container(config=AppConfig())
    container.register(RouteSolverPort, DijkstraRouteSolver)
    first = container.resolve(RouteSolverPort)

    container.clear_singletons()
    assert container.resolve(RouteSolverPort) is not first


def test_container_register_replaces_cached_singleton():
    container = Container(config=AppConfig())
    container.register(RouteSolverPort, DijkstraRouteSolver)
    first = container.resolve(RouteSolverPort)

    container.register(RouteSolverPort, RecordingSolver)

    assert isinstance(container.resolve(RouteSolverPort), RecordingSolver)
    assert container.resolve(RouteSolverPort) is not first


def test_container_default_bindings(tmp_path):
    graph_file = tmp_path / "graph.json"
    graph_file.write_text(json.dumps([{"from": 1, "to": 2, "weight": 3}]))
    (tmp_path / "journeys.json").write_text(json.dumps([{"from": 1, "to": 2}]))
    config = AppConfig(graph=GraphConfig(data_dir=tmp_path), indent=2)

    container = Container.create_default(config)

    graph_repository = container.resolve(GraphRepositoryPort)
    journeys_repository = container.resolve(JourneyRepositoryPort)
    planner = container.resolve(JourneyPlannerService)
    assert isinstance(graph_repository, JSONGraphRepository)
    assert isinstance(journeys_repository, JSONJourneyRepository)
    assert journeys_repository.indent == 2
    assert planner.graph_repository is graph_repository
    assert planner.plan(journeys_repository.load()) == [Journey(1, 2, (1, 2))]


def test_container_default_path_overrides(tmp_path):
    graph_file = tmp_path / "net.json"
    graph_file.write_text(json.dumps([]))
    container = Container.create_default(
        AppConfig(graph=GraphConfig(data_dir=tmp_path / "missing")),
        graph_path=graph_file,
    )

    assert len(container.resolve(GraphRepositoryPort).load()) == 0
