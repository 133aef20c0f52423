"""Engine registry: select a storage engine by type name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nomie_store._engine import StorageEngine

# Global engine factory registry: maps type strings to engine classes.
_ENGINE_FACTORIES: dict[str, type[StorageEngine]] = {}


def register_engine(type_name: str, cls: type[StorageEngine]) -> None:
    """Register an engine class for a given type string.

    :param type_name: The type identifier (e.g. ``"nomie-server"``).
    :param cls: The engine class to instantiate.
    """
    _ENGINE_FACTORIES[type_name] = cls


def _register_builtin_engines() -> None:
    """Register the built-in engines."""
    from nomie_store.engines._nomie_server import NomieServerEngine

    if "nomie-server" not in _ENGINE_FACTORIES:
        register_engine("nomie-server", NomieServerEngine)


def registered_engines() -> list[str]:
    """Return the sorted names of all registered engine types."""
    _register_builtin_engines()
    return sorted(_ENGINE_FACTORIES)


def create_engine(type_name: str, **options: Any) -> StorageEngine:
    """Instantiate the engine registered under ``type_name``.

    :param type_name: A registered engine type.
    :param options: Keyword arguments for the engine constructor.
    :raises ValueError: If the type is unknown or the options are invalid.
    """
    _register_builtin_engines()
    if type_name not in _ENGINE_FACTORIES:
        raise ValueError(f"Unknown engine type '{type_name}'. Registered types: {sorted(_ENGINE_FACTORIES)}")
    factory = _ENGINE_FACTORIES[type_name]
    try:
        return factory(**options)
    except TypeError as exc:
        raise ValueError(
            f"Invalid options for engine {type_name!r}: {exc}. Provided options: {sorted(options)}"
        ) from exc
