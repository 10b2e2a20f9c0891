"""
JSON-file record store.

The whole document (``{"users": [...], "tasks": [...]}``) is loaded on first
access and rewritten in full on every save. There is no locking: the backend
runs as a single process with a single writer, and the last write wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from .config import get_settings
from .exceptions import DatabaseError

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "tasks")


class JsonDatabase:
    """
    Collections of plain dict records backed by a single JSON file.

    Pass ``path=None`` to keep records in memory only (used by tests).
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path else None
        self._data: Optional[dict[str, list[dict[str, Any]]]] = None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def collection(self, name: str) -> list[dict[str, Any]]:
        """Return the mutable record list for a collection."""
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        data = self._load()
        return data.setdefault(name, [])

    def replace_collection(self, name: str, records: list[dict[str, Any]]) -> None:
        """Swap a collection's records wholesale (used by deletes)."""
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        self._load()[name] = records

    def save(self) -> None:
        """Rewrite the backing file with the current contents."""
        if self._data is None or self._path is None:
            return

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._data, fh, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as e:
            logger.error("Failed to save database to %s: %s", self._path, e)
            raise DatabaseError("Failed to save database") from e

    def status(self) -> dict[str, str]:
        """Report whether each expected collection is present."""
        data = self._load()
        return {
            name: "ready" if isinstance(data.get(name), list) else "missing"
            for name in COLLECTIONS
        }

    def _load(self) -> dict[str, list[dict[str, Any]]]:
        if self._data is not None:
            return self._data

        if self._path is None:
            self._data = {name: [] for name in COLLECTIONS}
            return self._data

        if not self._path.exists():
            self._data = {name: [] for name in COLLECTIONS}
            self.save()
            logger.info("Initialized new database at %s", self._path)
            return self._data

        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load database from %s: %s", self._path, e)
            raise DatabaseError("Failed to connect to database") from e

        if not isinstance(data, dict):
            raise DatabaseError("Failed to connect to database")

        self._data = data
        return self._data


# Module-level database cache
_database: Optional[JsonDatabase] = None


def get_database() -> JsonDatabase:
    """
    Get the process-wide database configured by DATABASE_PATH.

    An empty DATABASE_PATH keeps everything in memory.
    """
    global _database

    if _database is None:
        settings = get_settings()
        path = Path(settings.database_path) if settings.database_path else None
        _database = JsonDatabase(path)

    return _database


def reset_database_cache() -> None:
    """
    Reset the cached database.

    Useful for testing or when configuration changes.
    """
    global _database
    _database = None
