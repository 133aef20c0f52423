"""Configuration: init options, environment variables, and persisted credentials.

Demonstrates the precedence of credential sources: values persisted in the
key/value store win over values passed to init(), which in turn can come
from the environment.
"""

from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import httpx

from nomie_store import EngineOptions, JsonFileKeyValueStore, ServerConfig, create_engine


def _accept_all(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=[])


async def main() -> None:
    transport = httpx.MockTransport(_accept_all)

    # --- Option 1: config-as-code ---
    options = EngineOptions(server=ServerConfig(url="http://localhost:3011", token="my-api-key"))
    engine = create_engine("nomie-server", transport=transport)
    await engine.init(options)
    print(f"Option 1: {engine!r}")

    # --- Option 2: from_dict(), e.g. loaded from TOML or JSON ---
    options = EngineOptions.from_dict({"server": {"url": "http://nomie.lan:3011", "token": "k"}})
    engine = create_engine("nomie-server", transport=transport)
    await engine.init(options)
    print(f"Option 2: {engine!r}")

    # --- Option 3: environment variables ---
    env = {"NOMIE_SERVER_URL": "http://env.lan:3011", "NOMIE_SERVER_TOKEN": "env-key"}
    options = EngineOptions(server=ServerConfig.from_env(env))
    engine = create_engine("nomie-server", transport=transport)
    await engine.init(options)
    print(f"Option 3: {engine!r}")

    # --- Persisted credentials take precedence over init options ---
    with tempfile.TemporaryDirectory() as tmp:
        kv = JsonFileKeyValueStore(Path(tmp) / "settings.json")
        kv.set_item("nomie-server-url", "http://persisted.lan:3011")
        kv.set_item("nomie-server-token", "persisted-key")

        engine = create_engine("nomie-server", kv_store=kv, transport=transport)
        await engine.init({"server": {"url": "http://ignored", "token": "ignored"}})
        print(f"Persisted: {engine!r}")


if __name__ == "__main__":
    asyncio.run(main())
    print("Done!")
