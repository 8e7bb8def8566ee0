"""Tests for the StringStore backends."""
import json

import pytest

from pathkv import PathResolvingStore, StoreError
from pathkv.persistence import (
    FileStringStore,
    InMemoryStringStore,
    SQLiteStringStore,
    get_pathkv_home,
)


@pytest.fixture(params=["memory", "file", "sqlite"])
def backend(request, tmp_path):
    if request.param == "memory":
        yield InMemoryStringStore()
    elif request.param == "file":
        yield FileStringStore(tmp_path / "store.json")
    else:
        store = SQLiteStringStore(tmp_path / "store.db")
        yield store
        store.close()


# ═══════════════════════════════════════════════════════════════════════════
# Shared StringStore behaviour
# ═══════════════════════════════════════════════════════════════════════════

class TestStringStoreContract:
    def test_get_missing(self, backend):
        assert backend.get_item("nope") is None

    def test_set_and_get(self, backend):
        backend.set_item("k", "v")
        assert backend.get_item("k") == "v"

    def test_overwrite(self, backend):
        backend.set_item("k", "1")
        backend.set_item("k", "2")
        assert backend.get_item("k") == "2"

    def test_empty_string_value_is_present(self, backend):
        backend.set_item("k", "")
        assert backend.get_item("k") == ""

    def test_remove(self, backend):
        backend.set_item("k", "v")
        backend.remove_item("k")
        assert backend.get_item("k") is None

    def test_remove_missing_is_noop(self, backend):
        backend.set_item("other", "v")
        backend.remove_item("k")
        assert backend.keys() == ["other"]

    def test_clear(self, backend):
        backend.set_item("a", "1")
        backend.set_item("b", "2")
        backend.clear()
        assert backend.keys() == []

    def test_clear_empty(self, backend):
        backend.clear()
        assert backend.keys() == []

    def test_keys_sorted(self, backend):
        for key in ("b", "a", "c.d"):
            backend.set_item(key, "x")
        assert backend.keys() == ["a", "b", "c.d"]

    def test_path_store_over_backend(self, backend):
        store = PathResolvingStore(backend)
        store.set("user", {"addresses": [{"city": "Lisbon"}]})
        assert store.get("user.addresses.0.city") == "Lisbon"


# ═══════════════════════════════════════════════════════════════════════════
# FileStringStore
# ═══════════════════════════════════════════════════════════════════════════

class TestFileStringStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "store.json"
        FileStringStore(path).set_item("k", "v")
        assert FileStringStore(path).get_item("k") == "v"

    def test_no_file_until_first_write(self, tmp_path):
        path = tmp_path / "sub" / "store.json"
        store = FileStringStore(path)
        assert store.keys() == []
        store.clear()
        assert not path.exists()
        store.set_item("k", "v")
        assert path.exists()

    def test_file_is_json_object(self, tmp_path):
        path = tmp_path / "store.json"
        PathResolvingStore(FileStringStore(path)).set("cfg", {"a": 1})
        assert json.loads(path.read_text(encoding="utf-8")) == {"cfg": '{"a":1}'}

    def test_no_temp_file_left_behind(self, tmp_path):
        path = tmp_path / "store.json"
        FileStringStore(path).set_item("k", "v")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["store.json"]

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not valid json", encoding="utf-8")
        with pytest.raises(StoreError, match="Corrupt"):
            FileStringStore(path).get_item("k")

    def test_non_object_root_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(StoreError, match="not an object"):
            FileStringStore(path).keys()

    def test_non_string_value_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text('{"k": 1}', encoding="utf-8")
        with pytest.raises(StoreError, match="non-string"):
            FileStringStore(path).get_item("k")

    def test_default_path_uses_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATHKV_HOME", str(tmp_path))
        assert FileStringStore().path == tmp_path / "store.json"


# ═══════════════════════════════════════════════════════════════════════════
# SQLiteStringStore
# ═══════════════════════════════════════════════════════════════════════════

class TestSQLiteStringStore:
    def test_persists_across_connections(self, tmp_path):
        db = tmp_path / "store.db"
        with SQLiteStringStore(db) as store:
            store.set_item("k", "v")
        with SQLiteStringStore(db) as store:
            assert store.get_item("k") == "v"

    def test_close_then_reuse_reconnects(self, tmp_path):
        store = SQLiteStringStore(tmp_path / "store.db")
        store.set_item("k", "v")
        store.close()
        assert store.get_item("k") == "v"
        store.close()

    def test_default_path_uses_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATHKV_HOME", str(tmp_path))
        assert SQLiteStringStore().db_path == tmp_path / "store.db"


class TestHome:
    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATHKV_HOME", str(tmp_path))
        assert get_pathkv_home() == tmp_path

    def test_default(self, monkeypatch):
        monkeypatch.delenv("PATHKV_HOME", raising=False)
        assert get_pathkv_home().name == ".pathkv"
