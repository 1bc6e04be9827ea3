from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from hitbadge.config import Config

if TYPE_CHECKING:
    from hitbadge.core.modules.counter.service import CounterService


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""


class Services:
    """Service registry, started in registration order and stopped in reverse."""

    counter: CounterService

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        from hitbadge.core.modules.counter.service import CounterService  # noqa: PLC0415

        self.counter = CounterService(database)
        self._services: list[Service] = [self.counter]

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


def create_mongo_client(config: Config) -> AsyncMongoClient[dict[str, Any]]:
    """Build the pooled client; pool exhaustion fails after pool_timeout_ms instead of blocking."""
    return AsyncMongoClient(
        config.database_url,
        uuidRepresentation="standard",
        maxPoolSize=config.pool_max_size,
        waitQueueTimeoutMS=config.pool_timeout_ms,
        serverSelectionTimeoutMS=config.server_selection_timeout_ms,
    )


class Core:
    """Container providing config, database, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.mongo_client = create_mongo_client(config)
        self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:] or "hitbadge")
        self.services = Services(self.database)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        await self.mongo_client.aclose()
