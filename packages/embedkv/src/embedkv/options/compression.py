from __future__ import annotations

from enum import IntEnum


class CompressionType(IntEnum):
    """Block compression, valued by the engine's on-disk identifier."""

    no_compression = 0x0
    snappy_compression = 0x1


COMPRESSION_VALUES: frozenset[int] = frozenset(int(c) for c in CompressionType)
