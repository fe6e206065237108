"""
embedkv - validated option negotiation for an embedded key-value store.

Example:
    >>> from embedkv import connect, CompressionType
    >>> with connect("/tmp/example.db", bloom_filter_policy=10) as db:
    ...     db.put(b"k", b"v")
    ...     db.options.compression is CompressionType.snappy_compression
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from embedkv.core import (
    CreateIfMissingViolation,
    DatabaseClosedError,
    EmbedKVError,
    EngineIOFailure,
    ErrorIfExistsViolation,
    InvalidArgument,
    InvalidOptions,
    OpenError,
    TypeMismatch,
)
from embedkv.db import DatabaseOpener, Handle, connect, open_db
from embedkv.options import (
    DEFAULT_BLOCK_RESTART_INTERVAL,
    DEFAULT_BLOCK_SIZE,
    DEFAULT_COMPRESSION,
    DEFAULT_MAX_OPEN_FILES,
    DEFAULT_WRITE_BUFFER_SIZE,
    CompressionType,
    OptionsResolver,
    ResolvedOptions,
    resolve_options,
)

__all__ = [
    "DatabaseOpener",
    "Handle",
    "open_db",
    "connect",
    "OptionsResolver",
    "ResolvedOptions",
    "resolve_options",
    "CompressionType",
    "DEFAULT_BLOCK_RESTART_INTERVAL",
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_COMPRESSION",
    "DEFAULT_MAX_OPEN_FILES",
    "DEFAULT_WRITE_BUFFER_SIZE",
    "EmbedKVError",
    "OpenError",
    "InvalidOptions",
    "TypeMismatch",
    "InvalidArgument",
    "CreateIfMissingViolation",
    "ErrorIfExistsViolation",
    "EngineIOFailure",
    "DatabaseClosedError",
]
