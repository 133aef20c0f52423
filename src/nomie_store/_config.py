"""Configuration model: immutable data containers describing the server connection."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping

_URL_ENV = "NOMIE_SERVER_URL"
_TOKEN_ENV = "NOMIE_SERVER_TOKEN"

DEFAULT_SERVER_URL = "http://localhost:3011"


@dataclasses.dataclass(frozen=True)
class ServerConfig:
    """Caller-supplied server connection defaults.

    Persisted credentials take precedence over these values.

    :param url: Base URL of the Nomie Server.
    :param token: API key for the server.
    """

    url: str | None = None
    token: str | None = None

    def __repr__(self) -> str:
        token = "***" if self.token else self.token
        return f"ServerConfig(url={self.url!r}, token={token!r})"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Read ``NOMIE_SERVER_URL`` and ``NOMIE_SERVER_TOKEN``.

        :param environ: Mapping to read from (defaults to ``os.environ``).
        """
        env = os.environ if environ is None else environ
        return cls(url=env.get(_URL_ENV) or None, token=env.get(_TOKEN_ENV) or None)


@dataclasses.dataclass(frozen=True)
class EngineOptions:
    """Options passed to ``init()`` by the host application.

    :param server: Fallback connection settings.
    """

    server: ServerConfig = dataclasses.field(default_factory=ServerConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> EngineOptions:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with an optional ``server`` key holding ``url`` and ``token``.
        :raises TypeError: If ``server`` is not a dict or a field is not a string.
        """
        raw_server = data.get("server") or {}
        if not isinstance(raw_server, Mapping):
            msg = "Expected 'server' to be a dict"
            raise TypeError(msg)

        fields: dict[str, str | None] = {}
        for key in ("url", "token"):
            value = raw_server.get(key)
            if value is not None and not isinstance(value, str):
                msg = f"Server option '{key}' must be a string, got {type(value).__name__}"
                raise TypeError(msg)
            fields[key] = value or None

        return cls(server=ServerConfig(**fields))
