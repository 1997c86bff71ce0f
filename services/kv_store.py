"""
Namespaced key-value stores for orders and uploaded-file metadata.

The store is constructed once by the app factory and handed to the services
that need it; nothing reaches it through a module-level singleton.

Keys:
    <namespace>:orders       list of OrderRecord dicts
    <namespace>:storedFiles  list of StoredFile metadata dicts

Thread Safety:
    The Flask development server may serve requests on several threads, so
    both implementations guard reads and writes with a threading.Lock.
"""

from __future__ import annotations

import copy
import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from core.exceptions import StoreError
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


class KeyValueStore:
    """
    Interface for get/put/clear on namespaced keys.

    Values must be JSON-compatible. ``get`` returns a copy, so callers can
    mutate what they read without touching the stored value.
    """

    def __init__(self, namespace: str = "xerox"):
        self.namespace = namespace
        self._lock = threading.Lock()

    def key(self, name: str) -> str:
        """Full namespaced key for ``name``."""
        return f"{self.namespace}:{name}"

    def get(self, name: str, default: Any = None) -> Any:
        with self._lock:
            data = self._load()
            value = data.get(self.key(name), default)
            return copy.deepcopy(value)

    def put(self, name: str, value: Any) -> None:
        with self._lock:
            data = self._load()
            data[self.key(name)] = copy.deepcopy(value)
            self._save(data, name)

    def clear(self, name: str) -> None:
        with self._lock:
            data = self._load()
            data.pop(self.key(name), None)
            self._save(data, name)

    def _load(self) -> Dict[str, Any]:
        raise NotImplementedError

    def _save(self, data: Dict[str, Any], name: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """Store that lives for the lifetime of the process."""

    def __init__(self, namespace: str = "xerox"):
        super().__init__(namespace)
        self._data: Dict[str, Any] = {}

    def _load(self) -> Dict[str, Any]:
        return self._data

    def _save(self, data: Dict[str, Any], name: str) -> None:
        self._data = data


class JsonFileKeyValueStore(KeyValueStore):
    """
    Store backed by a single JSON document.

    The whole document is rewritten on each put/clear. A missing file reads
    as an empty store.
    """

    def __init__(self, path: str | Path, namespace: str = "xerox"):
        super().__init__(namespace)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read store {self.path}: {e}")
            raise StoreError("read", str(self.path), str(e)) from e

    def _save(self, data: Dict[str, Any], name: str) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            tmp_path.replace(self.path)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to write {self.key(name)} to {self.path}: {e}")
            raise StoreError("write", self.key(name), str(e)) from e


def create_store(backend: str, namespace: str, path: Optional[str] = None) -> KeyValueStore:
    """
    Build the store named by configuration.

    Args:
        backend: "memory" or "json"
        namespace: Key prefix
        path: JSON document path (required for "json")
    """
    if backend == "memory":
        return InMemoryKeyValueStore(namespace)
    if backend == "json":
        if not path:
            raise ValueError("STORE_PATH is required for the json store backend")
        return JsonFileKeyValueStore(path, namespace)
    raise ValueError(f"Unknown store backend: {backend}")
