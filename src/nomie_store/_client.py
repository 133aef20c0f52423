"""RequestClient: authenticated requests against the Nomie Server API."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import httpx

from nomie_store._errors import ConfigurationError, UnreachableError
from nomie_store._models import Credentials

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)


class RequestClient:
    """Builds ``{url}/api/{path}`` requests carrying a bearer token.

    Non-success statuses are returned to the caller untouched; only missing
    configuration and transport failures raise.

    :param credentials: Initial credentials (may be incomplete).
    :param transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    :param timeout: Request timeout in seconds; ``None`` disables it.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self.credentials = credentials or Credentials()
        self._transport = transport
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"RequestClient(url={self.credentials.url!r})"

    def _url(self, path: str, method: str) -> str:
        if not self.credentials.url:
            raise ConfigurationError(f"Cannot {method} {path!r} - API URL not set", path=path)
        if not self.credentials.token:
            raise ConfigurationError(f"Cannot {method} {path!r} - API token not set", path=path)
        return f"{self.credentials.url.rstrip('/')}/api/{path}"

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.credentials.token}"}

    @contextmanager
    def _errors(self, path: str) -> Iterator[None]:
        """Map httpx transport exceptions to nomie_store errors."""
        try:
            yield
        except httpx.TransportError as exc:
            raise UnreachableError(
                f"Cannot reach Nomie Server: {exc}", path=path, backend=self.credentials.url
            ) from exc

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path, method)
        log.debug("%s %s", method, url)
        with self._errors(path):
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.request(method, url, headers=self._headers(), **kwargs)
        log.debug("%s %s -> %d", method, url, response.status_code)
        return response

    async def get(self, path: str) -> httpx.Response:
        """Issue an authenticated GET."""
        return await self._send("GET", path)

    async def post(self, path: str, body: Any) -> httpx.Response:
        """Issue an authenticated POST with ``body`` serialized as JSON."""
        return await self._send("POST", path, json=body)

    async def delete(self, path: str) -> httpx.Response:
        """Issue an authenticated DELETE."""
        return await self._send("DELETE", path)
