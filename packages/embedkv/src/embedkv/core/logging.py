from __future__ import annotations

import logging
import sys
from typing import Any, Protocol, runtime_checkable

import structlog
from rich.logging import RichHandler
from structlog.contextvars import merge_contextvars

from .config import load_settings

_CONFIGURED = False


@runtime_checkable
class ILogger(Protocol):
    def debug(self, event: str, **kw: Any) -> Any: ...
    def info(self, event: str, **kw: Any) -> Any: ...
    def warning(self, event: str, **kw: Any) -> Any: ...
    def error(self, event: str, **kw: Any) -> Any: ...
    def exception(self, event: str, **kw: Any) -> Any: ...
    def bind(self, **kw: Any) -> "ILogger": ...


def _shared_processors() -> list[Any]:
    return [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(*, level: str | None = None, fmt: str | None = None) -> None:
    """
    Route structlog through the stdlib root logger.

    `level` and `fmt` fall back to the EMBEDKV_LOG_LEVEL / EMBEDKV_LOG_FORMAT
    settings. Only the first call has an effect.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    settings = load_settings()
    level = (level or settings.log_level).upper()
    fmt = fmt or settings.log_format

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    processors = _shared_processors()
    handler: logging.Handler
    if fmt == "console":
        handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=False,
            show_path=False,
        )
        processors.append(structlog.processors.KeyValueRenderer(sort_keys=True))
    else:
        handler = logging.StreamHandler(stream=sys.stdout)
        processors.append(structlog.processors.JSONRenderer())

    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    root.addHandler(handler)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def get_logger(name: str = "embedkv") -> structlog.stdlib.BoundLogger:
    """
    A structlog logger in front of the stdlib logger `name`.

    Until configure_logging() runs, output follows stdlib defaults (warnings
    and above to stderr), so importing code never writes to stdout.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
