"""StorageEngine abstract base class: the host storage contract."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from nomie_store._config import EngineOptions
    from nomie_store._models import Profile


class StorageEngine(abc.ABC):
    """Abstract base class for all storage engines.

    The host application selects one engine per session, calls ``init()``
    once, and waits for readiness before reading or writing.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Unique identifier for this engine type (e.g. ``'nomie-server'``)."""

    @abc.abstractmethod
    async def init(self, options: EngineOptions | Mapping[str, Any] | None = None) -> StorageEngine:
        """Prepare the engine for use and return it.

        :raises NomieStoreError: If the engine cannot be made usable.
        """

    @abc.abstractmethod
    def on_ready(self, fn: Callable[[], object]) -> None:
        """Register a zero-argument callback run once the engine is usable."""

    @abc.abstractmethod
    def fire_ready(self) -> None:
        """Run and clear all pending readiness callbacks."""

    @abc.abstractmethod
    def base_path(self, path: str) -> str:
        """Translate a host path into the engine's own path space."""

    @abc.abstractmethod
    async def get_profile(self) -> Profile:
        """Return the identity of the current user."""

    @abc.abstractmethod
    async def get(self, path: str) -> Any:
        """Read the content stored at ``path``."""

    @abc.abstractmethod
    async def put(self, path: str, content: Any) -> Any:
        """Store ``content`` at ``path``."""

    @abc.abstractmethod
    async def list(self, path: str | None = None) -> Any:
        """List entries under ``path`` (the root when omitted)."""

    @abc.abstractmethod
    async def delete(self, path: str) -> Any:
        """Remove the content stored at ``path``."""
