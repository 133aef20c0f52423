"""Immutable value objects shared by the engine and its collaborators."""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ConnectionState(enum.Enum):
    """Lifecycle states of a remote engine."""

    UNINITIALIZED = "uninitialized"
    ACQUIRING_CREDENTIALS = "acquiring_credentials"
    VALIDATING = "validating"
    READY = "ready"
    UNAUTHORIZED = "unauthorized"
    UNREACHABLE = "unreachable"


@dataclasses.dataclass(frozen=True)
class Credentials:
    """Endpoint URL and bearer token used for every request.

    :param url: Base URL of the Nomie Server (without the ``/api`` suffix).
    :param token: API key sent as a bearer token.
    """

    url: str | None = None
    token: str | None = None

    @property
    def is_complete(self) -> bool:
        """``True`` when both the URL and the token are non-empty."""
        return bool(self.url) and bool(self.token)

    def __repr__(self) -> str:
        token = "***" if self.token else self.token
        return f"Credentials(url={self.url!r}, token={token!r})"


@dataclasses.dataclass(frozen=True)
class Profile:
    """Identity reported to the host application.

    :param username: Display name of the current user.
    """

    username: str = "Local User"


@dataclasses.dataclass(frozen=True)
class RecoveryAction:
    """A single button of the recovery menu.

    :param title: Label shown to the user.
    :param click: Callback run when the user picks this action.
    """

    title: str
    click: Callable[[], None]


@dataclasses.dataclass(frozen=True)
class RecoveryMenu:
    """Choices offered when the server cannot be reached.

    :param id: Stable identifier the UI can use to de-duplicate menus.
    :param title: Heading shown above the actions.
    :param actions: Actions in display order.
    """

    id: str
    title: str
    actions: tuple[RecoveryAction, ...] = ()
