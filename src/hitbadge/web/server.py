from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from hitbadge.app import App
from hitbadge.config import Config
from hitbadge.errors import StorageError, UserError
from hitbadge.web.error_handlers import (
    general_exception_handler,
    request_validation_handler,
    storage_error_handler,
    user_error_handler,
)
from hitbadge.web.routers import counters_router

logger = structlog.get_logger(__name__)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            logger.info("ready", host=config.host, port=config.port)
            yield

    app = FastAPI(title="hitbadge", lifespan=lifespan)

    # Registered before the counter routes so that /health is not parsed as a counter id
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(counters_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app
