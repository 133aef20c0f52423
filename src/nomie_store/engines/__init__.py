"""Engine implementations."""

from nomie_store.engines._nomie_server import NomieServerEngine

__all__ = ["NomieServerEngine"]
