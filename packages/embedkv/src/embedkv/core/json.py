from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .fs import atomic_write_text


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """
    Deterministic JSON: sorted keys, compact separators when indent is None.
    """
    if indent is None:
        return json.dumps(obj, sort_keys=True, separators=(",", ":"))
    return json.dumps(obj, sort_keys=True, indent=indent)


def atomic_write_json(path: Path, obj: Any) -> None:
    atomic_write_text(path, stable_json_dumps(obj) + "\n")


def read_json(path: Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
