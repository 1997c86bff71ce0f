"""
Services layer for PrintShopWeb.

This module contains the business logic services:
- KeyValueStore: Namespaced get/put/clear persistence (memory or JSON file)
- FileStore: Uploaded documents, metadata persisted to the store
- OrderService: Order submission, tracking and administration
- Authenticator: Admin credential check

Ownership:
    create_app() builds one store and hands it to FileStore and
    OrderService; all are kept in app.config.
"""

from .kv_store import KeyValueStore, InMemoryKeyValueStore, JsonFileKeyValueStore, create_store
from .file_store import FileStore, StoredFile
from .order_service import OrderService
from .auth import Authenticator

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "create_store",
    "FileStore",
    "StoredFile",
    "OrderService",
    "Authenticator",
]
