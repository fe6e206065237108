from __future__ import annotations

from enum import StrEnum


class ValueKind(StrEnum):
    boolean = "boolean"
    integer = "integer"
    string = "string"
    null = "null"
    other = "other"


def kind_of(value: object) -> ValueKind:
    """
    Tag a raw option value. bool is checked before int since it subclasses it.
    """
    if isinstance(value, bool):
        return ValueKind.boolean
    if isinstance(value, int):
        return ValueKind.integer
    if isinstance(value, (str, bytes)):
        return ValueKind.string
    if value is None:
        return ValueKind.null
    return ValueKind.other


def describe(value: object) -> str:
    kind = kind_of(value)
    if kind is ValueKind.other:
        return f"{kind.value} ({type(value).__name__})"
    return kind.value
