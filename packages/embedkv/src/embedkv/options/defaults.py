from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from .compression import CompressionType

DEFAULT_WRITE_BUFFER_SIZE = 4 * 1024 * 1024
DEFAULT_MAX_OPEN_FILES = 1000
DEFAULT_BLOCK_SIZE = 4 * 1024
DEFAULT_BLOCK_RESTART_INTERVAL = 16
DEFAULT_COMPRESSION = CompressionType.snappy_compression

# Fixed for the life of the process.
ENGINE_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "create_if_missing": False,
        "error_if_exists": False,
        "paranoid_checks": False,
        "write_buffer_size": DEFAULT_WRITE_BUFFER_SIZE,
        "max_open_files": DEFAULT_MAX_OPEN_FILES,
        "block_cache_size": None,
        "block_size": DEFAULT_BLOCK_SIZE,
        "block_restart_interval": DEFAULT_BLOCK_RESTART_INTERVAL,
        "compression": DEFAULT_COMPRESSION,
        "bloom_filter_policy": None,
    }
)
