"""Tests for the key/value stores."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from nomie_store._kv import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore


@pytest.fixture
def json_store() -> JsonFileKeyValueStore:
    with tempfile.TemporaryDirectory() as tmp:
        yield JsonFileKeyValueStore(Path(tmp) / "nested" / "settings.json")  # type: ignore[misc]


class TestMemoryKeyValueStore:
    """In-memory key/value store."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryKeyValueStore(), KeyValueStore)

    def test_set_get_remove(self) -> None:
        kv = MemoryKeyValueStore()
        assert kv.get_item("a") is None
        kv.set_item("a", "1")
        assert kv.get_item("a") == "1"
        assert "a" in kv
        kv.remove_item("a")
        assert kv.get_item("a") is None

    def test_remove_missing_is_noop(self) -> None:
        MemoryKeyValueStore().remove_item("missing")

    def test_initial_contents_are_copied(self) -> None:
        initial = {"a": "1"}
        kv = MemoryKeyValueStore(initial)
        kv.set_item("a", "2")
        assert initial["a"] == "1"


class TestJsonFileKeyValueStore:
    """Atomic JSON file store; non-string values read as missing."""

    def test_satisfies_protocol(self, json_store: JsonFileKeyValueStore) -> None:
        assert isinstance(json_store, KeyValueStore)

    def test_missing_file_reads_as_empty(self, json_store: JsonFileKeyValueStore) -> None:
        assert json_store.get_item("a") is None
        assert not json_store.path.exists()

    def test_set_creates_file(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.set_item("nomie-server-url", "http://localhost:3011")
        data = json.loads(json_store.path.read_text(encoding="utf-8"))
        assert data == {"nomie-server-url": "http://localhost:3011"}

    def test_persists_across_instances(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.set_item("a", "1")
        assert JsonFileKeyValueStore(json_store.path).get_item("a") == "1"

    def test_remove(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.set_item("a", "1")
        json_store.set_item("b", "2")
        json_store.remove_item("a")
        assert json_store.get_item("a") is None
        assert json_store.get_item("b") == "2"

    def test_remove_missing_is_noop(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.remove_item("missing")
        assert not json_store.path.exists()

    def test_no_temp_files_left_behind(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.set_item("a", "1")
        json_store.set_item("a", "2")
        assert [p.name for p in json_store.path.parent.iterdir()] == ["settings.json"]

    def test_rejects_non_object_file(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True, exist_ok=True)
        json_store.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            json_store.get_item("a")

    def test_non_string_values_are_ignored(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True, exist_ok=True)
        json_store.path.write_text('{"nomie-server-url": null, "retries": 3, "other": "x"}', encoding="utf-8")
        assert json_store.get_item("nomie-server-url") is None
        assert json_store.get_item("retries") is None
        assert json_store.get_item("other") == "x"
