from __future__ import annotations

from dataclasses import dataclass, fields

from .compression import CompressionType
from .defaults import (
    DEFAULT_BLOCK_RESTART_INTERVAL,
    DEFAULT_BLOCK_SIZE,
    DEFAULT_COMPRESSION,
    DEFAULT_MAX_OPEN_FILES,
    DEFAULT_WRITE_BUFFER_SIZE,
)


@dataclass(frozen=True, slots=True)
class ResolvedOptions:
    """
    Fully validated options, exactly as handed to the storage engine.

    Built by OptionsResolver; never mutated afterwards. `block_cache_size`
    and `bloom_filter_policy` are None when no cache / filter is wired.
    """

    create_if_missing: bool = False
    error_if_exists: bool = False
    paranoid_checks: bool = False
    write_buffer_size: int = DEFAULT_WRITE_BUFFER_SIZE
    max_open_files: int = DEFAULT_MAX_OPEN_FILES
    block_cache_size: int | None = None
    block_size: int = DEFAULT_BLOCK_SIZE
    block_restart_interval: int = DEFAULT_BLOCK_RESTART_INTERVAL
    compression: CompressionType = DEFAULT_COMPRESSION
    bloom_filter_policy: int | None = None

    @classmethod
    def defaults(cls) -> "ResolvedOptions":
        return cls()

    def to_dict(self) -> dict[str, object]:
        return {
            "create_if_missing": self.create_if_missing,
            "error_if_exists": self.error_if_exists,
            "paranoid_checks": self.paranoid_checks,
            "write_buffer_size": self.write_buffer_size,
            "max_open_files": self.max_open_files,
            "block_cache_size": self.block_cache_size,
            "block_size": self.block_size,
            "block_restart_interval": self.block_restart_interval,
            "compression": int(self.compression),
            "bloom_filter_policy": self.bloom_filter_policy,
        }


RECOGNIZED_OPTIONS: tuple[str, ...] = tuple(f.name for f in fields(ResolvedOptions))
