from .config import Settings, load_settings
from .errors import (
    CreateIfMissingViolation,
    DatabaseClosedError,
    EmbedKVError,
    EngineIOFailure,
    ErrorIfExistsViolation,
    ErrorRecord,
    InvalidArgument,
    InvalidOptions,
    OpenError,
    TypeMismatch,
    error_record_from_exc,
)
from .fs import atomic_write_text, fsync_dir
from .json import atomic_write_json, read_json, stable_json_dumps
from .logging import ILogger, configure_logging, get_logger

__all__ = [
    "Settings",
    "load_settings",
    "EmbedKVError",
    "OpenError",
    "InvalidOptions",
    "TypeMismatch",
    "InvalidArgument",
    "CreateIfMissingViolation",
    "ErrorIfExistsViolation",
    "EngineIOFailure",
    "DatabaseClosedError",
    "ErrorRecord",
    "error_record_from_exc",
    "atomic_write_text",
    "fsync_dir",
    "atomic_write_json",
    "read_json",
    "stable_json_dumps",
    "ILogger",
    "configure_logging",
    "get_logger",
]
