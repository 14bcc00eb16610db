"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .adapters.export import CsvRouteExporter
from .adapters.registry import InMemoryCityRegistry
from .adapters.rendering import FoliumMapRenderer
from .config import AppConfig, get_config
from .graph.routes import Routes
from .ports.export import RouteExporterPort
from .ports.graph import CityLookupPort
from .ports.rendering import MapRendererPort
from .services.planner import RoutePlannerService

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Testing
        container = Container()
        container.register(CityLookupPort, lambda: registry)
        lookup = container.resolve(CityLookupPort)

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

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Build a container wired with the default adapters.

        Cities and links are read from the configured data files when
        they exist; otherwise the registry and engine start empty.
        """
        container = cls(config=config or get_config())
        routing = container.config.routing
        export = container.config.export

        def make_registry() -> InMemoryCityRegistry:
            registry = InMemoryCityRegistry()
            if routing.cities_path.is_file():
                registry.read_cities(routing.cities_path)
            else:
                logger.warning(
                    "Cities file not found",
                    extra={"path": str(routing.cities_path)},
                )
            return registry

        def make_routes() -> Routes:
            registry = container.resolve(InMemoryCityRegistry)
            routes = Routes(
                cities=registry,
                between=registry if routing.use_bounding_filter else None,
                default_mode=routing.mode,
            )
            if routing.links_path.is_file():
                routes.read_links(routing.links_path)
            return routes

        container.register(InMemoryCityRegistry, make_registry)
        container.register(
            CityLookupPort, lambda: container.resolve(InMemoryCityRegistry)
        )
        container.register(Routes, make_routes)
        container.register(
            RouteExporterPort,
            lambda: CsvRouteExporter(delimiter=export.delimiter, decimals=export.decimals),
        )
        container.register(MapRendererPort, FoliumMapRenderer)
        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                routes=container.resolve(Routes),
                exporter=container.resolve(RouteExporterPort),
                map_renderer=container.resolve(MapRendererPort),
            ),
        )
        return container
