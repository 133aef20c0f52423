"""Nomie Server engine: stores host data through the Nomie Server REST API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from nomie_store._client import RequestClient
from nomie_store._config import DEFAULT_SERVER_URL, EngineOptions
from nomie_store._credentials import CredentialStore
from nomie_store._engine import StorageEngine
from nomie_store._envelope import unwrap_envelope
from nomie_store._errors import (
    AuthenticationError,
    ConfigurationError,
    NomieStoreError,
    OperationError,
    UnreachableError,
)
from nomie_store._interact import RecoveryHooks
from nomie_store._kv import MemoryKeyValueStore
from nomie_store._listeners import ReadyListenerRegistry
from nomie_store._models import ConnectionState, Credentials, Profile, RecoveryAction, RecoveryMenu
from nomie_store._validator import ConnectionValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from nomie_store._interact import Interact, PopMenu
    from nomie_store._kv import KeyValueStore

log = logging.getLogger(__name__)

STORAGE_PREFIX = "n6storage"

URL_PROMPT = "Nomie Server URL"
TOKEN_PROMPT = "Nomie Server API Key"
MISSING_CREDENTIALS_MESSAGE = "Nomie Server requires a server object with url and token"
INVALID_TOKEN_MESSAGE = "Nomie Server API key is invalid. Please double check your settings."

RECOVERY_MENU_ID = "cannot-connect"
RECOVERY_MENU_TITLE = "Unable to Connect to Nomie Server with the current Configuration"


class NomieServerEngine(StorageEngine):
    """Storage engine backed by a remote Nomie Server.

    ``init()`` resolves credentials (persisted values, then ``options``, then
    the user), validates them with a single request, and fires the ready
    listeners. Reads are fail-soft: ``get()`` returns ``[]`` on any failure.
    Writes and listings raise.

    :param kv_store: Where credentials are persisted (defaults to memory).
    :param interact: Prompt/error UI used to collect missing credentials.
    :param pop_menu: Menu UI used to offer recovery actions.
    :param hooks: Host actions wired to the recovery menu buttons.
    :param transport: Optional httpx transport for all requests.
    :param timeout: Request timeout in seconds; ``None`` disables it.
    """

    def __init__(
        self,
        *,
        kv_store: KeyValueStore | None = None,
        interact: Interact | None = None,
        pop_menu: PopMenu | None = None,
        hooks: RecoveryHooks | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._credential_store = CredentialStore(kv_store if kv_store is not None else MemoryKeyValueStore())
        self._interact = interact
        self._pop_menu = pop_menu
        self._hooks = hooks or RecoveryHooks()
        self._client = RequestClient(transport=transport, timeout=timeout)
        self._validator = ConnectionValidator(self._client, on_failure=self._cannot_connect)
        self._listeners = ReadyListenerRegistry()
        self._state = ConnectionState.UNINITIALIZED

    def __repr__(self) -> str:
        return f"NomieServerEngine(url={self._client.credentials.url!r}, state={self._state.value!r})"

    @property
    def name(self) -> str:
        return "nomie-server"

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def credentials(self) -> Credentials:
        return self._client.credentials

    # region: lifecycle

    async def init(self, options: EngineOptions | Mapping[str, Any] | None = None) -> NomieServerEngine:
        """Acquire and validate credentials, then fire the ready listeners.

        :raises ConfigurationError: If no URL/token could be obtained.
        :raises AuthenticationError: If the server rejects the token. Ready
            listeners have still been fired.
        :raises UnreachableError: If the server cannot be reached or fails
            validation. The recovery menu has been shown.
        """
        opts = self._coerce_options(options)

        self._set_state(ConnectionState.ACQUIRING_CREDENTIALS)
        try:
            credentials = await self._acquire_credentials(opts)
        except Exception as exc:
            self._set_state(ConnectionState.UNINITIALIZED)
            self._show_error(exc.message if isinstance(exc, NomieStoreError) else str(exc))
            raise
        self._client.credentials = credentials

        self._set_state(ConnectionState.VALIDATING)
        try:
            is_valid = await self._validator.validate()
        except AuthenticationError:
            self._set_state(ConnectionState.UNAUTHORIZED)
            self.fire_ready()
            self._show_error(INVALID_TOKEN_MESSAGE)
            raise
        except Exception:
            self._set_state(ConnectionState.UNREACHABLE)
            await self._cannot_connect()
            raise

        if not is_valid:
            self._set_state(ConnectionState.UNREACHABLE)
            raise UnreachableError(
                "Nomie Server failed validation",
                backend=credentials.url,
                status_code=self._validator.last_status,
            )

        self._set_state(ConnectionState.READY)
        self.fire_ready()
        return self

    @staticmethod
    def _coerce_options(options: EngineOptions | Mapping[str, Any] | None) -> EngineOptions:
        if options is None:
            return EngineOptions()
        if isinstance(options, EngineOptions):
            return options
        if isinstance(options, Mapping):
            return EngineOptions.from_dict(options)
        msg = f"Expected EngineOptions or a mapping, got {type(options).__name__}"
        raise TypeError(msg)

    async def _acquire_credentials(self, options: EngineOptions) -> Credentials:
        credentials = self._credential_store.load(options.server)
        if not credentials.is_complete and self._interact is not None:
            url = await self._interact.prompt(URL_PROMPT, credentials.url or DEFAULT_SERVER_URL)
            token = await self._interact.prompt(TOKEN_PROMPT)
            credentials = Credentials(url=url or None, token=token or None)
            if credentials.is_complete:
                self._credential_store.save(credentials)
        if not credentials.is_complete:
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE, backend=credentials.url)
        return credentials

    def _set_state(self, state: ConnectionState) -> None:
        if state is not self._state:
            log.info("Nomie Server engine: %s -> %s", self._state.value, state.value)
        self._state = state

    def _show_error(self, message: str) -> None:
        if self._interact is None:
            log.error("%s", message)
            return
        self._interact.error(message)

    # endregion

    # region: readiness

    def on_ready(self, fn: Callable[[], object]) -> None:
        self._listeners.on_ready(fn)

    def fire_ready(self) -> None:
        count = self._listeners.fire()
        log.debug("Fired %d ready listener(s)", count)

    # endregion

    # region: recovery

    def recovery_menu(self) -> RecoveryMenu:
        """Describe the choices offered when the server cannot be reached."""
        return RecoveryMenu(
            id=RECOVERY_MENU_ID,
            title=RECOVERY_MENU_TITLE,
            actions=(
                RecoveryAction("Try again", self._reload),
                RecoveryAction("Switch to Local Storage", self._switch_to_local),
                RecoveryAction("Erase Nomie Server Config", self._erase_and_reload),
            ),
        )

    async def _cannot_connect(self) -> None:
        if self._pop_menu is None:
            log.warning("%s (no recovery menu configured)", RECOVERY_MENU_TITLE)
            return
        try:
            await self._pop_menu.open_menu(self.recovery_menu())
        except Exception:
            log.exception("Recovery menu failed")

    def _reload(self) -> None:
        if self._hooks.reload is None:
            log.warning("No reload hook configured")
            return
        self._hooks.reload()

    def _switch_to_local(self) -> None:
        if self._hooks.switch_to_local is None:
            log.warning("No switch-to-local hook configured")
            return
        self._hooks.switch_to_local()

    def _erase_and_reload(self) -> None:
        self._credential_store.clear()
        self._reload()

    # endregion

    # region: storage operations

    def base_path(self, path: str) -> str:
        return path

    async def get_profile(self) -> Profile:
        return Profile(username="Local User")

    async def get(self, path: str) -> Any:
        """Read ``path``. Returns ``[]`` instead of raising on any failure."""
        try:
            response = await self._client.get(f"{STORAGE_PREFIX}/{path}")
            if not response.is_success:
                log.warning("GET %s failed: %d %s", path, response.status_code, response.reason_phrase)
                return []
            return unwrap_envelope(response.json())
        except Exception as exc:
            log.warning("GET %s failed: %s", path, exc)
            return []

    async def put(self, path: str, content: Any) -> Any:
        """Write ``content`` as JSON to ``path`` and return the server's JSON reply.

        :raises OperationError: If the server answers with a non-success status.
        """
        response = await self._client.post(f"{STORAGE_PREFIX}/{path}", content)
        if not response.is_success:
            log.error("PUT request failed for %s: %d %s", path, response.status_code, response.reason_phrase)
            raise OperationError(
                f"Failed to save {path}: {response.reason_phrase}",
                path=path,
                backend=self._client.credentials.url,
                status_code=response.status_code,
            )
        return response.json()

    async def list(self, path: str | None = None) -> Any:
        """List entries under ``path`` (``"/"`` when omitted or empty)."""
        response = await self._client.post(f"{STORAGE_PREFIX}/list", {"path": path or "/"})
        return response.json()

    async def delete(self, path: str) -> httpx.Response:
        """Delete ``path`` and return the raw response without inspecting it."""
        return await self._client.delete(f"{STORAGE_PREFIX}/{path}")

    # endregion
