"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - one graph can serve concurrent searches
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        planner = container.resolve(JourneyPlannerService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: InMemoryRepository())
        repository = container.resolve(GraphRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        graph_path: Optional[Path] = None,
        journeys_path: Optional[Path] = None,
    ) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.
            graph_path: Graph file overriding the configured one.
            journeys_path: Journeys file overriding the configured one.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import (
            DijkstraRouteSolver,
            JSONGraphRepository,
            JSONJourneyRepository,
        )
        from .ports.graph import (
            GraphRepositoryPort,
            JourneyRepositoryPort,
            RouteSolverPort,
        )
        from .services import JourneyPlannerService

        config = config or get_config()
        container = cls(config=config)

        # Graph
        container.register(
            GraphRepositoryPort,
            lambda: JSONGraphRepository(config.graph, path=graph_path),
        )
        container.register(
            JourneyRepositoryPort,
            lambda: JSONJourneyRepository(
                config.graph, path=journeys_path, indent=config.indent
            ),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(),
        )

        # Main service
        def create_journey_planner() -> JourneyPlannerService:
            return JourneyPlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            )

        container.register(JourneyPlannerService, create_journey_planner)

        return container
