"""
Uploaded document storage.

File bytes live in memory for the lifetime of the process; only metadata
(name, size, type, path) is persisted to the key-value store so the admin
view can list what was uploaded. The FileStore is created by the app factory
and owned by the app.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from core.exceptions import UnsupportedFileError
from logging_config import get_logger
from services.kv_store import KeyValueStore


# Module logger
logger = get_logger(__name__)

STORED_FILES_KEY = "storedFiles"

ALLOWED_CONTENT_TYPES = {
    "application/pdf": "pdf",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
}


@dataclass
class StoredFile:
    """An uploaded document; ``data`` is never persisted."""

    name: str
    size: int
    type: str
    path: str
    data: Optional[bytes] = None

    def to_dict(self) -> Dict[str, Any]:
        """Metadata only, for the key-value store."""
        return {"name": self.name, "size": self.size, "type": self.type, "path": self.path}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoredFile":
        name = data.get("name", "")
        return cls(
            name=name,
            size=data.get("size", 0),
            type=data.get("type", ""),
            path=data.get("path") or f"/uploads/{name}",
        )


def is_allowed(filename: str, content_type: str) -> bool:
    """Accept PDF and Word documents by content type, falling back to extension."""
    if content_type in ALLOWED_CONTENT_TYPES:
        return True
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return extension in ALLOWED_CONTENT_TYPES.values()


def content_type_for(filename: str, content_type: str) -> str:
    """Normalize browsers that send a generic type for known extensions."""
    if content_type in ALLOWED_CONTENT_TYPES:
        return content_type
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    for known_type, known_extension in ALLOWED_CONTENT_TYPES.items():
        if extension == known_extension:
            return known_type
    return content_type


class FileStore:
    """
    Keeps uploaded documents keyed by path (``/uploads/<name>``).

    Metadata from a previous run is reloaded on construction; those entries
    have no bytes.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._files: Dict[str, StoredFile] = {}
        for entry in self.store.get(STORED_FILES_KEY, []):
            stored = StoredFile.from_dict(entry)
            self._files[stored.path] = stored

    def save(self, name: str, data: bytes, content_type: str) -> StoredFile:
        """
        Store an uploaded document.

        Raises:
            UnsupportedFileError: If the document is not a PDF or Word file.
        """
        if not is_allowed(name, content_type):
            raise UnsupportedFileError(name, content_type)

        stored = StoredFile(
            name=name,
            size=len(data),
            type=content_type_for(name, content_type),
            path=f"/uploads/{name}",
            data=data,
        )
        self._files[stored.path] = stored
        self._persist()
        logger.info(f"Stored file {stored.path} ({stored.size} bytes)")
        return stored

    def get(self, path: str) -> Optional[StoredFile]:
        """Look up by path, then by file name if the path is unknown."""
        if not path:
            logger.error("Attempted to get file with empty path")
            return None

        stored = self._files.get(path)
        if stored:
            return stored

        logger.info(f"File not found: {path}")
        file_name = path.rsplit("/", 1)[-1]
        for candidate in self._files.values():
            if candidate.name == file_name:
                logger.info(f"Found file by name instead: {file_name}")
                return candidate
        return None

    def all(self) -> List[StoredFile]:
        return list(self._files.values())

    def clear(self) -> int:
        """Remove all stored files; returns how many were removed."""
        removed = len(self._files)
        self._files.clear()
        self._persist()
        logger.info(f"Cleared {removed} stored files")
        return removed

    def _persist(self) -> None:
        self.store.put(STORED_FILES_KEY, [f.to_dict() for f in self._files.values()])
