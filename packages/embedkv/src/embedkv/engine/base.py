from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from embedkv.options import ResolvedOptions


class EngineError(Exception):
    """Raised by a storage engine's open primitive"""


class EngineNotFound(EngineError):
    """No database at the path and create_if_missing is false"""


class EngineAlreadyExists(EngineError):
    """A database exists at the path and error_if_exists is true"""


class EngineIOError(EngineError):
    """Anything else: lock contention, corruption, filesystem failures"""


@runtime_checkable
class EngineHandle(Protocol):
    def get(self, key: bytes) -> bytes | None: ...
    def put(self, key: bytes, value: bytes) -> None: ...
    def delete(self, key: bytes) -> None: ...
    def close(self) -> None: ...


@runtime_checkable
class StorageEngine(Protocol):
    def open(self, path: str | Path, options: ResolvedOptions) -> EngineHandle: ...
