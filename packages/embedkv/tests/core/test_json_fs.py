from __future__ import annotations

from pathlib import Path

from embedkv.core import fs, json


def test_atomic_write_text_replaces(tmp_path: Path) -> None:
    p = tmp_path / "nested" / "OPTIONS.json"
    fs.atomic_write_text(p, "first")
    fs.atomic_write_text(p, "second")
    assert p.read_text() == "second"
    assert [c.name for c in p.parent.iterdir()] == ["OPTIONS.json"]


def test_json_helpers(tmp_path: Path) -> None:
    obj = {"block_size": 4096, "bloom_filter_policy": None}
    out = tmp_path / "opts.json"
    json.atomic_write_json(out, obj)
    assert json.read_json(out) == obj
    assert out.read_text().endswith("\n")

    assert json.stable_json_dumps({"b": 1, "a": 2}, indent=None) == '{"a":2,"b":1}'
