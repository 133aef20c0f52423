"""Shared test fixtures and marker registration."""

from __future__ import annotations

import pytest

from nomie_store._kv import MemoryKeyValueStore
from tests.fakes import FakeInteract, FakePopMenu, FakeServer


def pytest_configure(config: object) -> None:
    """Register custom markers."""
    if isinstance(config, pytest.Config):
        config.addinivalue_line("markers", "integration: requires a running Nomie Server")


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def interact() -> FakeInteract:
    return FakeInteract()


@pytest.fixture
def pop_menu() -> FakePopMenu:
    return FakePopMenu()
