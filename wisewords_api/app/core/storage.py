"""
Storage backends for counters and serialized records.

A backend is a flat key-value engine with independently addressable
regions.  Counters are named integers; record regions map integer keys
to opaque byte payloads.  The service layer never talks to SQLite
directly: it goes through the backend opened at process start, which
tests replace with ``InMemoryBackend``.
"""

import logging
import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from .db import get_cursor, init_db
from .errors import StorageFault


logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Abstract interface for counter and record storage."""

    @abstractmethod
    def read_counter(self, name: str) -> int:
        """Return the current value of a counter (0 if never incremented)."""

    @abstractmethod
    def increment_counter(self, name: str) -> int:
        """Persist ``value + 1`` for the counter and return the new value."""

    @abstractmethod
    def put(self, region: str, key: int, payload: bytes) -> None:
        """Insert or replace the payload stored under ``key``."""

    @abstractmethod
    def get(self, region: str, key: int) -> Optional[bytes]:
        """Return the payload stored under ``key`` or ``None``."""

    @abstractmethod
    def items(self, region: str) -> List[Tuple[int, bytes]]:
        """Return every ``(key, payload)`` pair of a region in key order."""

    @abstractmethod
    def pop(self, region: str, key: int) -> Optional[bytes]:
        """Delete ``key`` and return its payload, or ``None`` if absent."""

    def count(self, region: str) -> int:
        return len(self.items(region))


class InMemoryBackend(StorageBackend):
    """Dictionary backed implementation used by tests and scripts."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._regions: Dict[str, Dict[int, bytes]] = {}

    def read_counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def increment_counter(self, name: str) -> int:
        value = self._counters.get(name, 0) + 1
        self._counters[name] = value
        return value

    def put(self, region: str, key: int, payload: bytes) -> None:
        self._regions.setdefault(region, {})[key] = payload

    def get(self, region: str, key: int) -> Optional[bytes]:
        return self._regions.get(region, {}).get(key)

    def items(self, region: str) -> List[Tuple[int, bytes]]:
        return sorted(self._regions.get(region, {}).items())

    def pop(self, region: str, key: int) -> Optional[bytes]:
        return self._regions.get(region, {}).pop(key, None)


# SQLite integers are signed 64-bit; no record can live above this key.
SQLITE_MAX_KEY = 2**63 - 1


def _storable_key(key: int) -> bool:
    return 0 <= key <= SQLITE_MAX_KEY


class SQLiteBackend(StorageBackend):
    """Durable backend on top of the ``counters`` and ``records`` tables.

    Every call opens its own connection, as the rest of the code base
    does, and commits before returning.  SQLite errors are fatal and
    surface as ``StorageFault``.  Lookups of keys SQLite cannot
    represent find nothing.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path
        init_db(db_path)

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.error("SQLite storage failure: %s", exc)
            raise StorageFault(str(exc)) from exc

    def read_counter(self, name: str) -> int:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT value FROM counters WHERE name = ?", (name,)
            ).fetchone()
            return row["value"] if row else 0

    def increment_counter(self, name: str) -> int:
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT OR IGNORE INTO counters (name, value) VALUES (?, 0)", (name,)
            )
            cursor.execute(
                "UPDATE counters SET value = value + 1 WHERE name = ?", (name,)
            )
            row = cursor.execute(
                "SELECT value FROM counters WHERE name = ?", (name,)
            ).fetchone()
            return row["value"]

    def put(self, region: str, key: int, payload: bytes) -> None:
        if not _storable_key(key):
            raise StorageFault(f"key {key} is outside the SQLite integer range")
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO records (region, id, payload) VALUES (?, ?, ?)",
                (region, key, payload),
            )

    def get(self, region: str, key: int) -> Optional[bytes]:
        if not _storable_key(key):
            return None
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT payload FROM records WHERE region = ? AND id = ?",
                (region, key),
            ).fetchone()
            return bytes(row["payload"]) if row else None

    def items(self, region: str) -> List[Tuple[int, bytes]]:
        with self._cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, payload FROM records WHERE region = ? ORDER BY id ASC",
                (region,),
            ).fetchall()
            return [(row["id"], bytes(row["payload"])) for row in rows]

    def pop(self, region: str, key: int) -> Optional[bytes]:
        if not _storable_key(key):
            return None
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT payload FROM records WHERE region = ? AND id = ?",
                (region, key),
            ).fetchone()
            if not row:
                return None
            cursor.execute(
                "DELETE FROM records WHERE region = ? AND id = ?", (region, key)
            )
            return bytes(row["payload"])

    def count(self, region: str) -> int:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT COUNT(*) AS total FROM records WHERE region = ?", (region,)
            ).fetchone()
            return row["total"]


# ---------------------------------------------------------------------------
# Process-wide backend
# ---------------------------------------------------------------------------

_backend: Optional[StorageBackend] = None
_backend_lock = threading.Lock()


def open_backend(backend: Optional[StorageBackend] = None) -> StorageBackend:
    """Install the process-wide backend and return it.

    Called once at startup.  Without an argument the SQLite backend on
    ``settings.database_url`` is opened.  There is no matching close:
    the backend lives for the rest of the process.
    """
    global _backend
    with _backend_lock:
        _backend = backend if backend is not None else SQLiteBackend()
        logger.info("Opened storage backend %s", type(_backend).__name__)
        return _backend


def get_backend() -> StorageBackend:
    """Return the backend installed by ``open_backend``.

    Opens the default SQLite backend lazily if none was installed, so
    scripts can use the services without running the web application.
    """
    if _backend is None:
        return open_backend()
    return _backend
