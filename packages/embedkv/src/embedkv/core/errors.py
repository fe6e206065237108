from __future__ import annotations

import traceback
from dataclasses import dataclass
from pathlib import Path


class EmbedKVError(RuntimeError):
    """Base error"""


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """
    A normalized error record for open failures.
    """

    exc_type: str
    message: str
    traceback: str


def error_record_from_exc(exc: BaseException) -> ErrorRecord:
    return ErrorRecord(
        exc_type=type(exc).__name__,
        message=str(exc),
        traceback="".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ),
    )


class OpenError(EmbedKVError):
    """
    An open attempt failed. No engine resource is held when this is raised.
    """


class InvalidOptions(OpenError):
    """The option map did not resolve"""


class TypeMismatch(InvalidOptions, TypeError):
    """
    Wrong kind of value for an option (e.g. a bool or a numeric string
    where an integer is expected)
    """

    def __init__(self, field: str, expected: str, got: str) -> None:
        self.field = field
        self.expected = expected
        self.got = got
        super().__init__(f"option {field!r}: expected {expected}, got {got}")


class InvalidArgument(InvalidOptions, ValueError):
    """Right kind of value, but outside the option's domain"""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"option {field!r}: {reason}")


class CreateIfMissingViolation(OpenError):
    """No database at path and create_if_missing is false"""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"{self.path}: does not exist (create_if_missing is false)")


class ErrorIfExistsViolation(OpenError):
    """A database already exists at path and error_if_exists is true"""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"{self.path}: exists (error_if_exists is true)")


class EngineIOFailure(OpenError):
    """
    Opaque storage-layer failure (lock held, corruption, filesystem error).
    The engine's own error is chained as __cause__.
    """

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = str(path)
        self.detail = detail
        super().__init__(f"{self.path}: {detail}")


class DatabaseClosedError(EmbedKVError):
    """Operation on a handle that has been closed"""
