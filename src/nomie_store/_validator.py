"""ConnectionValidator: a single authenticated check against the server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nomie_store._errors import AuthenticationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from nomie_store._client import RequestClient

log = logging.getLogger(__name__)

VALIDATE_PATH = "auth/validate"

_AUTH_STATUSES = frozenset({401, 403})


class ConnectionValidator:
    """Checks that the configured server accepts the configured token.

    :param client: Request client holding the credentials to check.
    :param on_failure: Awaited when the server answers with a non-auth
        failure, before ``validate()`` returns ``False``. Errors it raises
        are logged, not propagated.

    ``last_status`` holds the status of the most recent answer, or ``None``
    when no answer was received.
    """

    def __init__(self, client: RequestClient, on_failure: Callable[[], Awaitable[None]]) -> None:
        self._client = client
        self._on_failure = on_failure
        self.last_status: int | None = None

    async def validate(self) -> bool:
        """Call ``auth/validate`` once.

        :returns: ``True`` on a 2xx answer, ``False`` on any other non-auth status.
        :raises AuthenticationError: If the server rejects the token (401/403).
        :raises UnreachableError: If the server cannot be reached.
        :raises ConfigurationError: If the URL or token is missing.
        """
        self.last_status = None
        response = await self._client.get(VALIDATE_PATH)
        self.last_status = response.status_code
        if response.is_success:
            return True
        if response.status_code in _AUTH_STATUSES:
            raise AuthenticationError(
                "Unauthorized", backend=self._client.credentials.url, status_code=response.status_code
            )
        log.warning("Nomie Server validation failed with status %d", response.status_code)
        try:
            await self._on_failure()
        except Exception:
            log.exception("Validation failure handler raised")
        return False
