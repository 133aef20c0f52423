"""CredentialStore: persisted server URL and token."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nomie_store._models import Credentials

if TYPE_CHECKING:
    from nomie_store._config import ServerConfig
    from nomie_store._kv import KeyValueStore

log = logging.getLogger(__name__)

URL_KEY = "nomie-server-url"
TOKEN_KEY = "nomie-server-token"


class CredentialStore:
    """Reads and writes the server credentials in a key/value store.

    :param kv_store: Host key/value storage.
    """

    def __init__(self, kv_store: KeyValueStore) -> None:
        self._kv = kv_store

    def __repr__(self) -> str:
        return f"CredentialStore(kv_store={self._kv!r})"

    def load(self, defaults: ServerConfig | None = None) -> Credentials:
        """Return persisted credentials, filling gaps from ``defaults``.

        Each field is resolved independently: an empty or missing persisted
        value falls back to the matching default. Missing values come back as
        ``None``.
        """
        url = self._kv.get_item(URL_KEY) or (defaults.url if defaults else None) or None
        token = self._kv.get_item(TOKEN_KEY) or (defaults.token if defaults else None) or None
        return Credentials(url=url, token=token)

    def save(self, credentials: Credentials) -> None:
        """Persist both fields.

        If writing the token fails, the URL is restored to its previous
        value before the error propagates.
        """
        previous_url = self._kv.get_item(URL_KEY)
        self._kv.set_item(URL_KEY, credentials.url or "")
        try:
            self._kv.set_item(TOKEN_KEY, credentials.token or "")
        except Exception:
            if previous_url is None:
                self._kv.remove_item(URL_KEY)
            else:
                self._kv.set_item(URL_KEY, previous_url)
            raise
        log.debug("Saved Nomie Server credentials for %s", credentials.url)

    def clear(self) -> None:
        """Remove both fields so the next ``init()`` prompts again."""
        self._kv.remove_item(URL_KEY)
        self._kv.remove_item(TOKEN_KEY)
        log.debug("Cleared Nomie Server credentials")
