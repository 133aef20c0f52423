"""Remote storage engine for hosts that persist their data on a Nomie Server."""

from nomie_store._client import RequestClient
from nomie_store._config import DEFAULT_SERVER_URL, EngineOptions, ServerConfig
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
from nomie_store._interact import Interact, PopMenu, RecoveryHooks
from nomie_store._kv import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from nomie_store._listeners import ReadyListenerRegistry
from nomie_store._models import ConnectionState, Credentials, Profile, RecoveryAction, RecoveryMenu
from nomie_store._registry import create_engine, register_engine, registered_engines
from nomie_store._validator import ConnectionValidator
from nomie_store.engines._nomie_server import NomieServerEngine

__version__ = "0.1.0"

__all__ = [
    # Core
    "StorageEngine",
    "NomieServerEngine",
    "create_engine",
    "register_engine",
    "registered_engines",
    # Components
    "RequestClient",
    "ConnectionValidator",
    "CredentialStore",
    "ReadyListenerRegistry",
    "unwrap_envelope",
    # Persistence
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    # Models
    "ConnectionState",
    "Credentials",
    "Profile",
    "RecoveryAction",
    "RecoveryMenu",
    # Collaborators
    "Interact",
    "PopMenu",
    "RecoveryHooks",
    # Config
    "ServerConfig",
    "EngineOptions",
    "DEFAULT_SERVER_URL",
    # Errors
    "NomieStoreError",
    "ConfigurationError",
    "AuthenticationError",
    "UnreachableError",
    "OperationError",
    # Version
    "__version__",
]
