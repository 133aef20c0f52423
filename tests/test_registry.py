"""Tests for the engine registry."""

from __future__ import annotations

import pytest

from nomie_store._engine import StorageEngine
from nomie_store._registry import _ENGINE_FACTORIES, create_engine, register_engine, registered_engines
from nomie_store.engines import NomieServerEngine


def test_builtin_engine_registered() -> None:
    assert "nomie-server" in registered_engines()


def test_create_engine_returns_instance() -> None:
    engine = create_engine("nomie-server", timeout=5.0)
    assert isinstance(engine, NomieServerEngine)
    assert isinstance(engine, StorageEngine)


def test_create_engine_unknown_type() -> None:
    with pytest.raises(ValueError, match="Unknown engine type 'ftp'"):
        create_engine("ftp")


def test_create_engine_invalid_options() -> None:
    with pytest.raises(ValueError, match="bogus"):
        create_engine("nomie-server", bogus=True)


def test_register_custom_engine() -> None:
    register_engine("custom", NomieServerEngine)
    try:
        assert "custom" in registered_engines()
        assert isinstance(create_engine("custom"), NomieServerEngine)
    finally:
        _ENGINE_FACTORIES.pop("custom", None)
