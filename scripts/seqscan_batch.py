#!/usr/bin/env python3
"""Run seqscan operations over a JSONL batch of requests.

Each input line is one request::

    {"id": "r1", "op": "longest_palindrome", "args": ["abcded"]}

Results are written one per line (``--output``) or as a JSON array to
stdout, with progress and per-record failures logged to stderr.

Usage::

    python3 scripts/seqscan_batch.py --input requests.jsonl --output results.jsonl
    python3 scripts/seqscan_batch.py --input requests.jsonl --ops word_pattern,check_inclusion
    python3 scripts/seqscan_batch.py --list-ops
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from seqscan.io_utils import (
    RecordDecodeError,
    dump_json_stdout,
    dumps_json,
    load_jsonl,
    save_jsonl,
)
from seqscan.registry import OPERATIONS, run_operation

log = logging.getLogger("seqscan_batch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run seqscan operations over a JSONL batch of requests."
    )
    parser.add_argument("--input", type=Path, help="Request JSONL path")
    parser.add_argument(
        "--output", type=Path, default=None,
        help="Result JSONL path (default: JSON array on stdout)",
    )
    parser.add_argument(
        "--ops", default="",
        help="Comma-separated op names to run; other records are skipped",
    )
    parser.add_argument(
        "--fail-fast", action="store_true",
        help="Stop at the first failing record and exit 1",
    )
    parser.add_argument("--list-ops", action="store_true", help="Print op names and exit")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _parse_ops(raw: str) -> set[str]:
    ops = {part.strip() for part in raw.split(",") if part.strip()}
    unknown = sorted(ops - OPERATIONS.keys())
    if unknown:
        raise ValueError(f"Unknown op(s) in --ops: {', '.join(unknown)}")
    return ops


def process_record(record: dict[str, Any], index: int) -> dict[str, Any]:
    """Run one request and wrap its outcome in a result row."""
    record_id = record.get("id", index)
    op = str(record.get("op") or "")
    args = record.get("args", [])
    if not isinstance(args, list):
        return {"id": record_id, "op": op, "ok": False, "error": "args must be a list"}
    try:
        result = run_operation(op, args)
    except (TypeError, ValueError) as exc:
        return {"id": record_id, "op": op, "ok": False, "error": str(exc)}
    row = {"id": record_id, "op": op, "ok": True, "result": result}
    # Rows must survive output encoding (orjson rejects ints beyond 64 bits).
    try:
        dumps_json(row)
    except TypeError as exc:
        return {"id": record_id, "op": op, "ok": False, "error": f"unencodable result: {exc}"}
    return row


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.list_ops:
        for name, op in sorted(OPERATIONS.items()):
            print(f"{name}\t{op.arity}")
        return 0

    if args.input is None:
        log.error("--input is required unless --list-ops is given")
        return 1
    if not args.input.exists():
        log.error("Input not found: %s", args.input)
        return 1

    try:
        selected_ops = _parse_ops(args.ops)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        records = load_jsonl(args.input)
    except RecordDecodeError as exc:
        log.error("Could not read requests: %s", exc)
        return 1
    log.info("Loaded %d request(s) from %s", len(records), args.input)

    results: list[dict[str, Any]] = []
    failures = 0
    t0 = time.monotonic()
    for index, record in enumerate(records):
        op = record.get("op")
        if selected_ops and (not isinstance(op, str) or op not in selected_ops):
            log.debug("Skipping record %s (op %r)", record.get("id", index), op)
            continue
        row = process_record(record, index)
        results.append(row)
        if not row["ok"]:
            failures += 1
            log.warning("Record %s failed: %s", row["id"], row["error"])
            if args.fail_fast:
                break

    log.info(
        "Processed %d record(s), %d failed (%.3fs)",
        len(results), failures, time.monotonic() - t0,
    )

    if args.output is not None:
        save_jsonl(results, args.output)
        log.info("Results written to %s", args.output)
    else:
        dump_json_stdout(results)

    if args.fail_fast and failures:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
