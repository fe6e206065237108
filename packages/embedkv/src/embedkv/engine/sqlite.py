from __future__ import annotations

import fcntl
import os
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path

from embedkv.core.errors import DatabaseClosedError
from embedkv.core.json import atomic_write_json
from embedkv.options import ResolvedOptions

from .base import EngineAlreadyExists, EngineIOError, EngineNotFound

_KV_DDL = (
    "CREATE TABLE IF NOT EXISTS kv ("
    "key BLOB PRIMARY KEY, value BLOB NOT NULL"
    ") WITHOUT ROWID;"
)


@dataclass(frozen=True, slots=True)
class StoreLayout:
    """
    On-disk layout of one database directory:

      {root}/data.sqlite
      {root}/LOCK
      {root}/OPTIONS.json
    """

    root: Path

    def data_sqlite(self) -> Path:
        return self.root / "data.sqlite"

    def lock_file(self) -> Path:
        return self.root / "LOCK"

    def options_json(self) -> Path:
        return self.root / "OPTIONS.json"

    def exists(self) -> bool:
        return self.data_sqlite().is_file()


def _acquire_lock(lock_path: Path) -> int:
    fd = os.open(lock_path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
    except BlockingIOError as exc:
        os.close(fd)
        raise EngineIOError(f"lock {lock_path}: already held by process") from exc
    except OSError:
        os.close(fd)
        raise
    return fd


def _release_lock(fd: int) -> None:
    try:
        fcntl.flock(fd, fcntl.LOCK_UN)
    finally:
        os.close(fd)


def _cache_size_pragma(block_cache_size: int) -> str:
    # Negative cache_size is a budget in KiB rather than pages.
    kib = max(block_cache_size, 0) // 1024
    return f"PRAGMA cache_size = {-kib};"


class SqliteHandle:
    """
    A live sqlite-backed store. Holds the directory lock until close().
    """

    def __init__(self, layout: StoreLayout, conn: sqlite3.Connection, lock_fd: int) -> None:
        self.layout = layout
        self._conn = conn
        self._lock_fd = lock_fd
        self._mu = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _conn_locked(self) -> sqlite3.Connection:
        # Caller holds self._mu.
        if self._closed:
            raise DatabaseClosedError(f"{self.layout.root}: database is closed")
        return self._conn

    def get(self, key: bytes) -> bytes | None:
        with self._mu:
            row = self._conn_locked().execute("SELECT value FROM kv WHERE key = ?;", (key,)).fetchone()
        return None if row is None else bytes(row[0])

    def put(self, key: bytes, value: bytes) -> None:
        with self._mu:
            self._conn_locked().execute(
                "INSERT INTO kv(key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value;",
                (key, value),
            )

    def delete(self, key: bytes) -> None:
        with self._mu:
            self._conn_locked().execute("DELETE FROM kv WHERE key = ?;", (key,))

    def close(self) -> None:
        with self._mu:
            if self._closed:
                return
            self._closed = True
            try:
                self._conn.close()
            finally:
                _release_lock(self._lock_fd)


class SqliteEngine:
    """
    Reference storage engine: one sqlite file per database directory.

    Existence rules match LevelDB's DB::Open. A missing database is an error
    unless create_if_missing is set; an existing one is an error whenever
    error_if_exists is set.
    """

    def open(self, path: str | Path, options: ResolvedOptions) -> SqliteHandle:
        layout = StoreLayout(root=Path(path))
        exists = layout.exists()

        if not exists and not options.create_if_missing:
            raise EngineNotFound(f"{layout.root}: does not exist (create_if_missing is false)")
        if exists and options.error_if_exists:
            raise EngineAlreadyExists(f"{layout.root}: exists (error_if_exists is true)")

        try:
            layout.root.mkdir(parents=True, exist_ok=True)
            lock_fd = _acquire_lock(layout.lock_file())
        except OSError as exc:
            raise EngineIOError(f"{layout.root}: {exc}") from exc

        try:
            conn = self._connect(layout, options, created=not exists)
        except BaseException:
            _release_lock(lock_fd)
            raise
        return SqliteHandle(layout, conn, lock_fd)

    def _connect(
        self, layout: StoreLayout, options: ResolvedOptions, *, created: bool
    ) -> sqlite3.Connection:
        conn: sqlite3.Connection | None = None
        try:
            conn = sqlite3.connect(
                layout.data_sqlite().as_posix(),
                isolation_level=None,
                check_same_thread=False,
            )
            if created:
                # Only takes effect before the first table is written.
                conn.execute(f"PRAGMA page_size = {int(options.block_size)};")
            if options.block_cache_size is not None:
                conn.execute(_cache_size_pragma(options.block_cache_size))
            conn.execute(_KV_DDL)

            if options.paranoid_checks:
                (result,) = conn.execute("PRAGMA integrity_check;").fetchone()
                if result != "ok":
                    raise EngineIOError(f"{layout.root}: corruption: {result}")

            atomic_write_json(layout.options_json(), options.to_dict())
        except (sqlite3.Error, OSError) as exc:
            if conn is not None:
                conn.close()
            raise EngineIOError(f"{layout.root}: {exc}") from exc
        except BaseException:
            if conn is not None:
                conn.close()
            raise
        return conn
