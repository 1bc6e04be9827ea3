"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from doubles import FakeDatabase, InMemoryCounterService, install_counter_service
from fastapi.testclient import TestClient

from hitbadge.app import App
from hitbadge.config import Config
from hitbadge.core.modules.counter.service import CounterService
from hitbadge.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Configuration pointing at a database that is never contacted."""
    return Config(database_url="mongodb://localhost:27017/hitbadge_test", logo_base_url="https://icons.test")


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def counter_service(fake_database):
    """CounterService running against the in-process fake database."""
    return CounterService(fake_database)  # type: ignore[arg-type]


@pytest.fixture
def memory_counters():
    return InMemoryCounterService()


@pytest.fixture
def client(config, memory_counters) -> Iterator[TestClient]:
    """HTTP client for the full FastAPI app backed by in-memory counters."""
    app = App(config)
    install_counter_service(app, memory_counters)
    with TestClient(create_fastapi_app(app, config)) as test_client:
        yield test_client
