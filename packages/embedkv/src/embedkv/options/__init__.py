from .compression import CompressionType
from .defaults import (
    DEFAULT_BLOCK_RESTART_INTERVAL,
    DEFAULT_BLOCK_SIZE,
    DEFAULT_COMPRESSION,
    DEFAULT_MAX_OPEN_FILES,
    DEFAULT_WRITE_BUFFER_SIZE,
    ENGINE_DEFAULTS,
)
from .kinds import ValueKind, kind_of
from .resolved import RECOGNIZED_OPTIONS, ResolvedOptions
from .resolver import OptionsResolver, RawOptions, resolve_options

__all__ = [
    "CompressionType",
    "DEFAULT_BLOCK_RESTART_INTERVAL",
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_COMPRESSION",
    "DEFAULT_MAX_OPEN_FILES",
    "DEFAULT_WRITE_BUFFER_SIZE",
    "ENGINE_DEFAULTS",
    "ValueKind",
    "kind_of",
    "RECOGNIZED_OPTIONS",
    "ResolvedOptions",
    "OptionsResolver",
    "RawOptions",
    "resolve_options",
]
