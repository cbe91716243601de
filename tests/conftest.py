"""
Pytest configuration for the todo service.

Provides fixtures for:
- Deterministic id generation
- Empty and seeded in-memory stores
- A FastAPI TestClient bound to an injected store
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from todo_service.api.app import create_app
from todo_service.config import Settings
from todo_service.store.ids import IdGenerator
from todo_service.store.memory import InMemoryTodoStore

TEST_SEED = 42


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(host="127.0.0.1", port=3999, log_level="DEBUG", seed_on_startup=False)


@pytest.fixture
def id_generator() -> IdGenerator:
    """Id generator with a fixed seed so runs are reproducible."""
    return IdGenerator(seed=TEST_SEED)


@pytest.fixture
def store(id_generator: IdGenerator) -> InMemoryTodoStore:
    """A fresh, empty store."""
    return InMemoryTodoStore(id_generator=id_generator)


@pytest.fixture
def seeded_store(store: InMemoryTodoStore) -> InMemoryTodoStore:
    """A store populated with the example todos."""
    store.populate()
    return store


@pytest.fixture
def client(
    store: InMemoryTodoStore, test_settings: Settings
) -> Generator[TestClient, None, None]:
    """
    TestClient for an app backed by the `store` fixture.

    Tests can inspect `store` directly to verify what the handlers did.
    """
    with TestClient(create_app(store=store, settings=test_settings)) as test_client:
        yield test_client
