from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast
from urllib.parse import urlparse

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from psynverse.config import Config

logger = structlog.get_logger(__name__)

DEFAULT_DATABASE_NAME = "app"


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    from psynverse.core.modules.book.service import BookService  # noqa: PLC0415
    from psynverse.core.modules.feed.service import FeedService  # noqa: PLC0415
    from psynverse.core.modules.image.service import ImageService  # noqa: PLC0415
    from psynverse.core.modules.post.service import PostService  # noqa: PLC0415
    from psynverse.core.modules.session.service import SessionService  # noqa: PLC0415
    from psynverse.core.modules.settings.service import SettingsService  # noqa: PLC0415

    session: SessionService
    settings: SettingsService
    post: PostService
    book: BookService
    image: ImageService
    feed: FeedService

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []
        self._database = database

        # Service configuration: (attribute_name, module_path, class_name)
        # Session first so a missing secret stops startup before any index work
        service_configs = [
            ("session", "psynverse.core.modules.session.service", "SessionService"),
            ("settings", "psynverse.core.modules.settings.service", "SettingsService"),
            ("post", "psynverse.core.modules.post.service", "PostService"),
            ("book", "psynverse.core.modules.book.service", "BookService"),
            ("image", "psynverse.core.modules.image.service", "ImageService"),
            ("feed", "psynverse.core.modules.feed.service", "FeedService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(database)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


def get_database_name(database_url: str) -> str:
    """Database name from the URL path, falling back to the default one."""
    name = urlparse(database_url).path.lstrip("/")
    return name or DEFAULT_DATABASE_NAME


class Core:
    """Container providing config, database, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    services: Services

    def __init__(self, config: Config) -> None:
        """Initialize core with config, MongoDB, and auto-register services."""
        self.config = config
        self.mongo_client = AsyncMongoClient(config.database_url, tz_aware=True)
        self.database = self.mongo_client.get_database(get_database_name(config.database_url))
        self.services = Services(self.database)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()
        logger.info("core_started", database=self.database.name)

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        await self.mongo_client.aclose()
