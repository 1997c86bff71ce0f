"""
Unit tests for the key-value stores and the uploaded file store.
"""

import json

import pytest

from core.exceptions import StoreError, UnsupportedFileError
from services.file_store import FileStore, STORED_FILES_KEY
from services.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, create_store


# Fixtures

@pytest.fixture
def json_store(tmp_path):
    return JsonFileKeyValueStore(tmp_path / "data" / "store.json", namespace="xerox")


class TestInMemoryStore:

    def test_get_put_clear(self, store):
        assert store.get("orders") is None
        assert store.get("orders", []) == []

        store.put("orders", [{"orderId": "ORD-1"}])
        assert store.get("orders") == [{"orderId": "ORD-1"}]

        store.clear("orders")
        assert store.get("orders") is None

    def test_get_returns_copy(self, store):
        store.put("orders", [])
        orders = store.get("orders")
        orders.append({"orderId": "ORD-1"})
        assert store.get("orders") == []

    def test_namespaces_are_isolated(self):
        shop = InMemoryKeyValueStore(namespace="shop")
        assert shop.key("orders") == "shop:orders"


class TestJsonFileStore:

    def test_persists_namespaced_keys(self, json_store):
        json_store.put("orders", [{"orderId": "ORD-1"}])

        with open(json_store.path, encoding="utf-8") as f:
            raw = json.load(f)
        assert raw == {"xerox:orders": [{"orderId": "ORD-1"}]}

    def test_survives_reopen(self, json_store):
        json_store.put("storedFiles", [{"name": "a.pdf"}])
        reopened = JsonFileKeyValueStore(json_store.path, namespace="xerox")
        assert reopened.get("storedFiles") == [{"name": "a.pdf"}]

    def test_missing_file_is_empty(self, json_store):
        assert json_store.get("orders", []) == []

    def test_corrupt_file_raises(self, json_store):
        json_store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError):
            json_store.get("orders")


class TestCreateStore:

    def test_memory(self):
        assert isinstance(create_store("memory", "x"), InMemoryKeyValueStore)

    def test_json_requires_path(self):
        with pytest.raises(ValueError):
            create_store("json", "x")

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store("redis", "x")


class TestFileStore:

    def test_save_and_get(self, store):
        files = FileStore(store)
        stored = files.save("thesis.pdf", b"%PDF-1.4", "application/pdf")

        assert stored.path == "/uploads/thesis.pdf"
        assert stored.size == 8
        assert files.get("/uploads/thesis.pdf") is stored

    def test_metadata_persisted_without_bytes(self, store):
        FileStore(store).save("notes.docx", b"PK...", "application/octet-stream")

        entries = store.get(STORED_FILES_KEY)
        assert entries == [{
            "name": "notes.docx",
            "size": 5,
            "type": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "path": "/uploads/notes.docx",
        }]

    def test_reload_from_store(self, store):
        FileStore(store).save("a.pdf", b"data", "application/pdf")
        reloaded = FileStore(store)
        assert [f.name for f in reloaded.all()] == ["a.pdf"]
        assert reloaded.get("/uploads/a.pdf").data is None

    def test_get_falls_back_to_name(self, store):
        files = FileStore(store)
        files.save("report.pdf", b"data", "application/pdf")
        assert files.get("/elsewhere/report.pdf").name == "report.pdf"
        assert files.get("/uploads/missing.pdf") is None
        assert files.get("") is None

    def test_rejects_unsupported_type(self, store):
        with pytest.raises(UnsupportedFileError):
            FileStore(store).save("photo.png", b"\x89PNG", "image/png")

    def test_clear(self, store):
        files = FileStore(store)
        files.save("a.pdf", b"1", "application/pdf")
        files.save("b.doc", b"2", "application/msword")

        assert files.clear() == 2
        assert files.all() == []
        assert store.get(STORED_FILES_KEY) == []
