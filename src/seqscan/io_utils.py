"""JSON / JSONL helpers for batch request and result files.

orjson when installed, stdlib json otherwise. Only the batch driver
touches files; the algorithm modules never import this.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, BinaryIO

_orjson: Any
try:
    import orjson
    _orjson = orjson
except ImportError:
    _orjson = None


class RecordDecodeError(ValueError):
    """A JSONL line could not be decoded into an object."""

    def __init__(self, path: Path, line_no: int, detail: str) -> None:
        super().__init__(f"{path}:{line_no}: {detail}")
        self.path = path
        self.line_no = line_no


def dumps_json(obj: Any, *, pretty: bool = False) -> bytes:
    """Encode ``obj`` with sorted keys; indent 2 when ``pretty``."""
    if _orjson is not None:
        opts = _orjson.OPT_SORT_KEYS
        if pretty:
            opts |= _orjson.OPT_INDENT_2
        return _orjson.dumps(obj, option=opts)
    return json.dumps(
        obj, indent=2 if pretty else None, sort_keys=True, ensure_ascii=False,
    ).encode("utf-8")


def _loads(raw: bytes) -> Any:
    if _orjson is not None:
        return _orjson.loads(raw)
    return json.loads(raw)


def load_jsonl(path: Path) -> list[dict[str, Any]]:
    """Load one JSON object per line. Blank lines skipped.

    Raises:
        RecordDecodeError: a line is not valid JSON or not an object.
    """
    records: list[dict[str, Any]] = []
    for line_no, line in enumerate(path.read_bytes().split(b"\n"), 1):
        line = line.strip()
        if not line:
            continue
        try:
            record = _loads(line)
        except ValueError as exc:
            raise RecordDecodeError(path, line_no, str(exc)) from exc
        if not isinstance(record, dict):
            raise RecordDecodeError(path, line_no, "expected a JSON object")
        records.append(record)
    return records


def save_jsonl(records: list[dict[str, Any]], path: Path) -> None:
    """Write records as JSON Lines, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        write_jsonl(records, f)


def write_jsonl(records: list[dict[str, Any]], stream: BinaryIO) -> None:
    for record in records:
        stream.write(dumps_json(record))
        stream.write(b"\n")


def dump_json_stdout(obj: Any) -> None:
    sys.stdout.buffer.write(dumps_json(obj, pretty=True))
    sys.stdout.buffer.write(b"\n")
