"""Error handling: configuration, authentication, and connectivity failures.

Demonstrates the normalized error hierarchy, the recovery menu, and the
fail-soft behaviour of get().
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from nomie_store import (
    AuthenticationError,
    ConfigurationError,
    NomieServerEngine,
    NomieStoreError,
    OperationError,
    RecoveryHooks,
    RecoveryMenu,
    UnreachableError,
)


class ConsoleUI:
    """Prints prompts, errors, and menus instead of showing dialogs."""

    async def prompt(self, label: str, default: str | None = None) -> str | None:
        print(f"[prompt] {label} (default={default!r}) -> cancelled")
        return None

    def error(self, message: str) -> None:
        print(f"[error] {message}")

    async def open_menu(self, menu: RecoveryMenu) -> None:
        print(f"[menu] {menu.title}")
        for action in menu.actions:
            print(f"  - {action.title}")


def _reject_token(request: httpx.Request) -> httpx.Response:
    return httpx.Response(401, json={"error": "Unauthorized"})


def _network_down(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def _reject_writes(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/auth/validate":
        return httpx.Response(200)
    return httpx.Response(507)


async def main() -> None:
    ui = ConsoleUI()
    options = {"server": {"url": "http://localhost:3011", "token": "my-api-key"}}
    hooks = RecoveryHooks(reload=lambda: print("reloading"), switch_to_local=lambda: print("switching"))

    # --- ConfigurationError: no credentials and the user cancels the prompt ---
    try:
        await NomieServerEngine(interact=ui).init()
    except ConfigurationError as exc:
        print(f"ConfigurationError: {exc}\n")

    # --- AuthenticationError: the engine still becomes usable ---
    engine = NomieServerEngine(interact=ui, transport=httpx.MockTransport(_reject_token))
    engine.on_ready(lambda: print("ready listeners still fire"))
    try:
        await engine.init(options)
    except AuthenticationError as exc:
        print(f"AuthenticationError: {exc} (state={engine.state.value})\n")

    # --- UnreachableError: the recovery menu is shown ---
    engine = NomieServerEngine(interact=ui, pop_menu=ui, hooks=hooks, transport=httpx.MockTransport(_network_down))
    try:
        await engine.init(options)
    except UnreachableError as exc:
        print(f"UnreachableError: {exc}")
        print(f"  cause={exc.__cause__!r}\n")

    # get() never raises, even with the network down
    print(f"get() while unreachable: {await engine.get('trackers')}\n")

    # --- OperationError: the server refuses a write ---
    engine = NomieServerEngine(transport=httpx.MockTransport(_reject_writes))
    await engine.init(options)
    try:
        await engine.put("trackers", [])
    except OperationError as exc:
        print(f"OperationError: {exc}")
        print(f"  path={exc.path}, status={exc.status_code}\n")

    # --- Catch any nomie_store error with the base class ---
    try:
        await NomieServerEngine().put("trackers", [])
    except NomieStoreError as exc:
        print(f"NomieStoreError ({type(exc).__name__}): {exc}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.CRITICAL)
    asyncio.run(main())
    print("\nDone!")
