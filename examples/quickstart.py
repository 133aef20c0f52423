"""Quickstart: initialize the Nomie Server engine, write, read, and list.

Demonstrates:
- Passing server credentials through init options
- Waiting for readiness with on_ready()
- put(), get(), list(), and delete()

An in-process stand-in server (httpx.MockTransport) keeps the example
self-contained. Drop ``transport=`` to talk to a real Nomie Server.
"""

from __future__ import annotations

import asyncio
import json

import httpx

from nomie_store import NomieServerEngine

_files: dict[str, object] = {}


def _fake_server(request: httpx.Request) -> httpx.Response:
    key = request.url.path.removeprefix("/api/")
    if key == "auth/validate":
        return httpx.Response(200, json={"ok": True})
    key = key.removeprefix("n6storage/")
    if request.method == "POST" and key == "list":
        return httpx.Response(200, json=sorted(_files))
    if request.method == "POST":
        _files[key] = json.loads(request.content)
        return httpx.Response(200, json={"success": True})
    if request.method == "DELETE":
        _files.pop(key, None)
        return httpx.Response(200, json={"success": True})
    if key in _files:
        return httpx.Response(200, json={"data": _files[key]})
    return httpx.Response(404)


async def main() -> None:
    engine = NomieServerEngine(transport=httpx.MockTransport(_fake_server))
    engine.on_ready(lambda: print("Engine is ready"))

    await engine.init({"server": {"url": "http://localhost:3011", "token": "my-api-key"}})
    print(f"State: {engine.state.value}")

    await engine.put("trackers", [{"tag": "mood", "type": "range"}])
    print(f"Trackers: {await engine.get('trackers')}")
    print(f"Files: {await engine.list()}")

    await engine.delete("trackers")
    print(f"After delete: {await engine.get('trackers')}")


if __name__ == "__main__":
    asyncio.run(main())
    print("Done!")
