# src/task_tracker/storage/backends.py

"""
Synchronous string key-value backends used by StorageManager.

Every backend offers the same four calls (get/set/remove/enumerate). Any of
them may raise StorageError; StorageManager is the boundary that turns those
failures into False/default return values.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Underlying key-value store failed (unavailable, I/O, corruption)."""


class QuotaExceededError(StorageError):
    """A write would take the store over its size quota."""


class KeyValueBackend(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...


class InMemoryBackend:
    """
    Dict-backed store that lives as long as the process.

    quota caps the total number of characters (keys + values) held, like a
    browser's per-origin storage limit.
    """

    def __init__(self, quota: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self._quota = quota

    def _size_with(self, key: str, value: str) -> int:
        size = sum(len(k) + len(v) for k, v in self._items.items() if k != key)
        return size + len(key) + len(value)

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._quota is not None and self._size_with(key, value) > self._quota:
            raise QuotaExceededError(
                f"Writing {key!r} would exceed the storage quota of {self._quota} characters"
            )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class SQLiteBackend:
    """
    File-persistent store on a single SQLite table.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "storage.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SQLiteBackend ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _get_conn(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open {self._db_path}: {e}") from e

    def _ensure_schema(self) -> None:
        self._execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )

    def _execute(self, sql: str, params: tuple = ()) -> list[tuple]:
        conn = self._get_conn()
        try:
            cur = conn.execute(sql, params)
            rows = cur.fetchall()
            conn.commit()
            return rows
        except sqlite3.Error as e:
            raise StorageError(f"SQLite error on {self._db_path}: {e}") from e
        finally:
            conn.close()

    def get_item(self, key: str) -> str | None:
        rows = self._execute("SELECT value FROM kv WHERE key = ?", (key,))
        return rows[0][0] if rows else None

    def set_item(self, key: str, value: str) -> None:
        self._execute(
            "INSERT INTO kv(key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )

    def remove_item(self, key: str) -> None:
        self._execute("DELETE FROM kv WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        return [row[0] for row in self._execute("SELECT key FROM kv ORDER BY key")]
