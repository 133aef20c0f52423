"""Key/value persistence used to remember the server credentials."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String key/value storage provided by the host application."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove ``key``. Missing keys are ignored."""
        ...


class MemoryKeyValueStore:
    """Process-local store; contents are lost when the process exits.

    :param initial: Optional initial contents.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def __repr__(self) -> str:
        return f"MemoryKeyValueStore(keys={sorted(self._items)!r})"

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore:
    """Store backed by a single JSON object on the local filesystem.

    Every mutation rewrites the whole file via temp file + rename, so readers
    never observe a partially written file.

    :param path: Location of the JSON file. Parent folders are created on first write.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileKeyValueStore(path={str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        if not raw.strip():
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            msg = f"Expected a JSON object in {self._path}, got {type(data).__name__}"
            raise ValueError(msg)
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = json.dumps(items, indent=2, sort_keys=True).encode("utf-8")
        fd, tmp_path = tempfile.mkstemp(dir=str(self._path.parent), suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._dump(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._dump(items)
