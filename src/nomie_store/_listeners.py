"""ReadyListenerRegistry: one-shot readiness notifications."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


class ReadyListenerRegistry:
    """Ordered, identity-unique set of zero-argument callbacks.

    Once ``fire()`` has run, the registry remembers that the engine is ready
    and invokes later registrants immediately.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[], object]] = []
        self._ready = False

    def __repr__(self) -> str:
        return f"ReadyListenerRegistry(pending={len(self._listeners)}, ready={self._ready})"

    def __len__(self) -> int:
        return len(self._listeners)

    @property
    def is_ready(self) -> bool:
        return self._ready

    def on_ready(self, fn: Callable[[], object]) -> None:
        """Register ``fn``, or call it right away if already ready."""
        if self._ready:
            self._invoke(fn)
            return
        if not any(existing is fn for existing in self._listeners):
            self._listeners.append(fn)

    def fire(self) -> int:
        """Invoke every pending listener once, in order, then clear.

        :returns: Number of listeners invoked.
        """
        self._ready = True
        listeners, self._listeners = self._listeners, []
        for fn in listeners:
            self._invoke(fn)
        return len(listeners)

    def reset(self) -> None:
        """Forget readiness and drop pending listeners."""
        self._ready = False
        self._listeners = []

    @staticmethod
    def _invoke(fn: Callable[[], object]) -> None:
        try:
            fn()
        except Exception:
            log.exception("Ready listener %r failed", fn)
