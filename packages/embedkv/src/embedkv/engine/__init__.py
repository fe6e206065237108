from .base import (
    EngineAlreadyExists,
    EngineError,
    EngineHandle,
    EngineIOError,
    EngineNotFound,
    StorageEngine,
)
from .sqlite import SqliteEngine, SqliteHandle, StoreLayout

__all__ = [
    "EngineError",
    "EngineNotFound",
    "EngineAlreadyExists",
    "EngineIOError",
    "EngineHandle",
    "StorageEngine",
    "SqliteEngine",
    "SqliteHandle",
    "StoreLayout",
]
