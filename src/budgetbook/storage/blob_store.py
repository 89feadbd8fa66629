"""
Key-value blob stores for the persisted snapshot.

The state store only needs two operations: read the text stored under a key
(or learn that nothing is there) and overwrite it. Three backends:

- MemoryBlobStore: dict-backed, for tests and ephemeral sessions
- JsonFileBlobStore: one ``<key>.json`` file per key, replaced atomically
- SqliteBlobStore: single ``blobs`` table in a local SQLite database

Privacy: all backends are local-only. Never transmit blobs over networks,
they contain the household's financial data.
"""

from __future__ import annotations

import os
import re
import sqlite3
import tempfile
from pathlib import Path
from typing import Protocol


class BlobStoreError(OSError):
    """Raised when a blob cannot be read from or written to its backend."""


class BlobStore(Protocol):
    def read(self, key: str) -> str | None:
        """Return the text stored under ``key``, or None when absent."""
        ...

    def write(self, key: str, text: str) -> None:
        """Store ``text`` under ``key``, replacing any previous value."""
        ...


class MemoryBlobStore:
    """In-process blob store. Contents vanish with the object."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._blobs: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._blobs.get(key)

    def write(self, key: str, text: str) -> None:
        self._blobs[key] = text

    def keys(self) -> list[str]:
        return list(self._blobs)


SAFE_KEY_PATTERN = r"^[A-Za-z0-9_.-]+$"
_SAFE_KEY = re.compile(SAFE_KEY_PATTERN)


class JsonFileBlobStore:
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory followed by
    ``os.replace`` so a crash never leaves a half-written snapshot.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """File for ``key``. Keys are plain names: letters, digits, ``_``, ``.`` and ``-``."""
        if not _SAFE_KEY.match(key):
            raise BlobStoreError(f"Unsupported blob key: {key!r}")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise BlobStoreError(f"Failed to read {path}: {e}") from e

    def write(self, key: str, text: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise BlobStoreError(f"Failed to write {path}: {e}") from e


class SqliteBlobStore:
    """Blob store backed by a local SQLite database file.

    Usage:
        store = SqliteBlobStore(Path("data/budgetbook.db"))
        store.write("budgetbook_data", text)
        text = store.read("budgetbook_data")
    """

    def __init__(self, db_path: Path):
        """Initialize the store, creating the database and schema if needed.

        Args:
            db_path: Path to SQLite database file. Will be created if it doesn't exist.
        """
        self.db_path = Path(db_path)
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._init_schema()
        except (OSError, sqlite3.Error) as e:
            raise BlobStoreError(f"Failed to open {self.db_path}: {e}") from e

    def _init_schema(self) -> None:
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS blobs (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT DEFAULT (datetime('now'))
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def read(self, key: str) -> str | None:
        try:
            conn = sqlite3.connect(self.db_path)
            try:
                row = conn.execute("SELECT value FROM blobs WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise BlobStoreError(f"Failed to read {key!r} from {self.db_path}: {e}") from e
        return row[0] if row else None

    def write(self, key: str, text: str) -> None:
        try:
            conn = sqlite3.connect(self.db_path)
            try:
                conn.execute(
                    """
                    INSERT INTO blobs (key, value, updated_at) VALUES (?, ?, datetime('now'))
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                    """,
                    (key, text),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise BlobStoreError(f"Failed to write {key!r} to {self.db_path}: {e}") from e


__all__ = [
    "BlobStore",
    "BlobStoreError",
    "MemoryBlobStore",
    "JsonFileBlobStore",
    "SqliteBlobStore",
    "SAFE_KEY_PATTERN",
]
