from __future__ import annotations

"""
Snailfish homework CLI

Reads a list of snailfish numbers (one per line) and prints:

  part 1: <magnitude of the sum of every line>
  part 2: <largest magnitude of any two distinct lines added>

Examples:
  python3 -m snailfish.cli.homework_cli input/18.txt
  python3 -m snailfish.cli.homework_cli --stdin < input/18.txt
  python3 -m snailfish.cli.homework_cli --json --pretty --file input/18.txt

Contract: --json emits a payload carrying schema tag + schema_doc.
"""

import argparse
import datetime
import hashlib
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from snailfish.errors import SnailfishError
from snailfish.homework import format_answers, homework_lines, solve
from snailfish.json_versioning import maybe_add_schema_fields

SCHEMA_TAG = "snailfish-homework.v1"
SCHEMA_DOC = "docs/schemas/homework_schema.json"


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(lines: List[str]) -> str:
    payload = json.dumps(lines, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _read_input(args: argparse.Namespace) -> str:
    """
    Priority:
      1) positional path
      2) --file
      3) --stdin
    """
    if args.path is not None:
        return Path(args.path).read_text(encoding="utf-8")
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    if args.stdin:
        return sys.stdin.read()
    raise ValueError("No input provided. Use a path, --file, or --stdin.")


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Add up snailfish homework and report both answers.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--json", action="store_true", help="Emit JSON instead of the two answer lines.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--stdin", action="store_true", help="Read the homework from stdin.")
    ap.add_argument("--file", type=str, default=None, help="Read the homework from a file.")
    ap.add_argument("path", nargs="?", default=None, help="Homework file (same as --file).")
    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    if args.stdin and (args.file or args.path):
        print("error: --stdin and a file are mutually exclusive", file=sys.stderr)
        return 2

    try:
        text = _read_input(args)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    lines = homework_lines(text)
    try:
        answers = solve(text)
    except (SnailfishError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not args.json:
        print(format_answers(answers))
        return 0

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "numbers": len(lines),
        "part1": answers.part1,
        "part2": answers.part2,
        "meta": {
            "tool": "homework_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(lines),
            },
        },
    }
    _emit(maybe_add_schema_fields(payload), pretty=bool(args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
