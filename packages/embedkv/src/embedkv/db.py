from __future__ import annotations

import threading
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import TracebackType
from typing import Any

from embedkv.core import (
    CreateIfMissingViolation,
    DatabaseClosedError,
    EngineIOFailure,
    ErrorIfExistsViolation,
    ILogger,
    OpenError,
    error_record_from_exc,
    get_logger,
)
from embedkv.engine import (
    EngineAlreadyExists,
    EngineHandle,
    EngineIOError,
    EngineNotFound,
    SqliteEngine,
    StorageEngine,
)
from embedkv.options import OptionsResolver, RawOptions, ResolvedOptions


class Handle:
    """
    An open database.

    `options` is the exact record the engine was opened with, defaults
    included. close() is idempotent; the engine handle is released once.
    """

    def __init__(self, path: str | Path, options: ResolvedOptions, engine_handle: EngineHandle) -> None:
        self._path = Path(path)
        self._options = options
        self._engine_handle = engine_handle
        self._mu = threading.Lock()
        self._closed = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> ResolvedOptions:
        return self._options

    @property
    def closed(self) -> bool:
        return self._closed

    def _live(self) -> EngineHandle:
        with self._mu:
            if self._closed:
                raise DatabaseClosedError(f"{self._path}: database is closed")
            return self._engine_handle

    def get(self, key: bytes) -> bytes | None:
        return self._live().get(key)

    def put(self, key: bytes, value: bytes) -> None:
        self._live().put(key, value)

    def delete(self, key: bytes) -> None:
        self._live().delete(key)

    def close(self) -> None:
        with self._mu:
            if self._closed:
                return
            self._closed = True
        self._engine_handle.close()

    def __enter__(self) -> Handle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Handle {str(self._path)!r} {state}>"


class DatabaseOpener:
    """
    Resolve caller options, then open the database through a storage engine.

    Two entry points:
      - open(): strict. create_if_missing defaults to False, so opening a
        missing path with no options raises CreateIfMissingViolation.
      - open_or_create(): injects create_if_missing=True unless the caller
        passed the key explicitly. Nothing else changes.

    Validation happens before the engine is touched; a failed open holds no
    resources.
    """

    def __init__(
        self,
        engine: StorageEngine | None = None,
        *,
        resolver: OptionsResolver | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self.engine: StorageEngine = engine if engine is not None else SqliteEngine()
        self.resolver = resolver if resolver is not None else OptionsResolver()
        self.logger: ILogger = logger if logger is not None else get_logger("embedkv.db")

    def open(self, path: str | Path, raw: RawOptions | None = None) -> Handle:
        log = self.logger.bind(path=str(path))
        log.debug("db.open.start", mode="strict")

        try:
            resolved = self.resolver.resolve(raw)
            engine_handle = self._engine_open(path, resolved)
        except OpenError as exc:
            record = error_record_from_exc(exc)
            if isinstance(exc, EngineIOFailure):
                log.error(
                    "db.open.failed",
                    error=record.exc_type,
                    detail=record.message,
                    traceback=record.traceback,
                )
            else:
                log.warning("db.open.failed", error=record.exc_type, detail=record.message)
            raise

        log.info("db.open.ok", **resolved.to_dict())
        return Handle(path, resolved, engine_handle)

    def _engine_open(self, path: str | Path, resolved: ResolvedOptions) -> EngineHandle:
        try:
            return self.engine.open(path, resolved)
        except EngineNotFound as exc:
            raise CreateIfMissingViolation(path) from exc
        except EngineAlreadyExists as exc:
            raise ErrorIfExistsViolation(path) from exc
        except EngineIOError as exc:
            raise EngineIOFailure(path, str(exc)) from exc

    def open_or_create(self, path: str | Path, raw: RawOptions | None = None) -> Handle:
        if raw is not None and not isinstance(raw, Mapping):
            return self.open(path, raw)
        merged: dict[Any, object] = dict(raw or {})
        merged.setdefault("create_if_missing", True)
        return self.open(path, merged)


@lru_cache(maxsize=1)
def default_opener() -> DatabaseOpener:
    return DatabaseOpener()


def _merge(options: Mapping[Any, object] | None, kw: dict[str, object]) -> dict[Any, object]:
    merged: dict[Any, object] = dict(options or {})
    merged.update(kw)
    return merged


def open_db(path: str | Path, options: RawOptions | None = None, **kw: object) -> Handle:
    """Strict open with the default sqlite engine."""
    return default_opener().open(path, _merge(options, kw))


def connect(path: str | Path, options: RawOptions | None = None, **kw: object) -> Handle:
    """Open, creating the database when it does not exist yet."""
    return default_opener().open_or_create(path, _merge(options, kw))
