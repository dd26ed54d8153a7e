"""Tests for the local key-value storage backends."""

import json

import pytest

from services.storage import LocalStorage, MemoryStorage


def test_memory_storage_roundtrip():
    storage = MemoryStorage()
    assert storage.get_item("k") is None
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"
    storage.remove_item("k")
    assert storage.get_item("k") is None
    storage.remove_item("k")


def test_local_storage_missing_file_is_empty(tmp_path):
    storage = LocalStorage(tmp_path / "nope.json")
    assert storage.get_item("k") is None
    assert storage.keys() == []


def test_local_storage_persists_across_instances(tmp_path):
    path = tmp_path / "data" / "store.json"
    LocalStorage(path).set_item("공지", "값")
    assert LocalStorage(path).get_item("공지") == "값"
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"공지": "값"}


def test_local_storage_keeps_other_keys(tmp_path):
    storage = LocalStorage(tmp_path / "store.json")
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    storage.remove_item("a")
    assert storage.keys() == ["b"]


def test_local_storage_overwrites_value(tmp_path):
    storage = LocalStorage(tmp_path / "store.json")
    storage.set_item("a", "1")
    storage.set_item("a", "2")
    assert storage.get_item("a") == "2"


def test_local_storage_corrupt_file_raises(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(ValueError):
        LocalStorage(path).get_item("a")


def test_local_storage_corrupt_file_overwritten_on_write(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")
    storage = LocalStorage(path)
    storage.set_item("a", "1")
    assert storage.get_item("a") == "1"
    assert storage.keys() == ["a"]


def test_local_storage_corrupt_file_remove_is_quiet(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    LocalStorage(path).remove_item("a")
    assert path.read_text(encoding="utf-8") == "[1, 2]"
