"""Collaborator protocols for the host user interface."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from nomie_store._models import RecoveryMenu


@runtime_checkable
class Interact(Protocol):
    """Prompt and error surface of the host UI."""

    async def prompt(self, label: str, default: str | None = None) -> str | None:
        """Ask the user for a value. Returns ``None`` or ``""`` when cancelled."""
        ...

    def error(self, message: str) -> None:
        """Show an error message to the user."""
        ...


@runtime_checkable
class PopMenu(Protocol):
    """Menu surface used to present recovery choices."""

    async def open_menu(self, menu: RecoveryMenu) -> None:
        """Show ``menu`` to the user."""
        ...


@dataclasses.dataclass(frozen=True)
class RecoveryHooks:
    """Host actions behind the recovery menu buttons.

    :param reload: Restart the host application (re-runs ``init``).
    :param switch_to_local: Select the host's local storage engine.
    """

    reload: Callable[[], None] | None = None
    switch_to_local: Callable[[], None] | None = None
