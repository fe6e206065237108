from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from embedkv.core.config import UnknownOptionsPolicy, load_settings
from embedkv.core.errors import InvalidArgument, TypeMismatch

from .compression import COMPRESSION_VALUES, CompressionType
from .kinds import ValueKind, describe, kind_of
from .resolved import RECOGNIZED_OPTIONS, ResolvedOptions

RawOptions = Mapping[Any, object]
Check = Callable[[str, object], object]


def _check_bool(name: str, value: object) -> bool:
    if kind_of(value) is not ValueKind.boolean:
        raise TypeMismatch(name, "boolean", describe(value))
    return bool(value)


def _check_int(name: str, value: object) -> int:
    if kind_of(value) is not ValueKind.integer:
        raise TypeMismatch(name, "integer", describe(value))
    return int(value)  # type: ignore[call-overload]


def _check_optional_int(name: str, value: object) -> int | None:
    if value is None:
        return None
    return _check_int(name, value)


def _check_compression(name: str, value: object) -> CompressionType:
    if isinstance(value, CompressionType):
        return value
    # Out-of-range integers fail the same way as wrong-typed values.
    if kind_of(value) is ValueKind.integer and value in COMPRESSION_VALUES:
        return CompressionType(value)
    got = describe(value)
    if kind_of(value) is ValueKind.integer:
        got = f"integer {value!r}"
    raise TypeMismatch(name, "CompressionType member", got)


def _check_bloom_filter_policy(name: str, value: object) -> int | None:
    """
    Bits per key. Kind first (unsigned integer), then domain (> 0).
    """
    if value is None:
        return None
    if kind_of(value) is not ValueKind.integer:
        raise TypeMismatch(name, "unsigned integer", describe(value))
    bits = int(value)  # type: ignore[call-overload]
    if bits < 0:
        raise TypeMismatch(name, "unsigned integer", "negative integer")
    if bits == 0:
        raise InvalidArgument(name, "bits per key must be greater than zero")
    return bits


_CHECKS: dict[str, Check] = {
    "create_if_missing": _check_bool,
    "error_if_exists": _check_bool,
    "paranoid_checks": _check_bool,
    "write_buffer_size": _check_int,
    "max_open_files": _check_int,
    "block_cache_size": _check_optional_int,
    "block_size": _check_int,
    "block_restart_interval": _check_int,
    "compression": _check_compression,
    "bloom_filter_policy": _check_bloom_filter_policy,
}


class OptionsResolver:
    """
    Turn a loosely typed option map into a ResolvedOptions record.

    Pure and stateless apart from the unknown-key policy, so one instance can
    be shared between threads:

      - "reject": any unrecognized key raises InvalidArgument
      - "ignore": unrecognized keys are dropped

    The policy defaults to the EMBEDKV_UNKNOWN_OPTIONS setting.
    """

    __slots__ = ("unknown_options",)

    def __init__(self, unknown_options: UnknownOptionsPolicy | None = None) -> None:
        policy = unknown_options or load_settings().unknown_options
        if policy not in ("reject", "ignore"):
            raise InvalidArgument("unknown_options", f"must be 'reject' or 'ignore', got {policy!r}")
        self.unknown_options: UnknownOptionsPolicy = policy

    def resolve(self, raw: RawOptions | None = None) -> ResolvedOptions:
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise TypeMismatch("options", "mapping", describe(raw))

        if self.unknown_options == "reject":
            unknown = sorted(str(k) for k in raw if k not in _CHECKS)
            if unknown:
                raise InvalidArgument(
                    unknown[0],
                    f"unrecognized option (got {', '.join(unknown)})",
                )

        # Checked in field order so the first failure is deterministic.
        values = {
            name: _CHECKS[name](name, raw[name])
            for name in RECOGNIZED_OPTIONS
            if name in raw
        }
        return ResolvedOptions(**values)  # type: ignore[arg-type]


def resolve_options(
    raw: RawOptions | None = None,
    *,
    unknown_options: UnknownOptionsPolicy | None = None,
) -> ResolvedOptions:
    return OptionsResolver(unknown_options).resolve(raw)
