from __future__ import annotations

import json

import pytest

from work_hours.core.exceptions import StorageError
from work_hours.storage.json_file_storage import JsonFileStorage
from work_hours.storage.memory_storage import MemoryStorage


def test_memory_storage_set_get_remove():
    storage = MemoryStorage()
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"

    storage.remove_item("k")
    storage.remove_item("k")
    assert storage.get_item("k") is None


def test_json_file_storage_persists_between_instances(tmp_path):
    path = tmp_path / "data" / "store.json"
    JsonFileStorage(path).set_item("rememberUser", "alice")

    assert JsonFileStorage(path).get_item("rememberUser") == "alice"
    assert json.loads(path.read_text(encoding="utf-8")) == {"rememberUser": "alice"}


def test_json_file_storage_missing_file_is_empty(tmp_path):
    assert JsonFileStorage(tmp_path / "nope.json").get_item("anything") is None


def test_json_file_storage_corrupted_file_degrades_to_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    storage = JsonFileStorage(path)
    assert storage.get_item("workHoursUsers") is None

    storage.set_item("currentUser", "bob")
    assert json.loads(path.read_text(encoding="utf-8")) == {"currentUser": "bob"}


def test_json_file_storage_write_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    storage = JsonFileStorage(blocker / "store.json")
    with pytest.raises(StorageError):
        storage.set_item("k", "v")
