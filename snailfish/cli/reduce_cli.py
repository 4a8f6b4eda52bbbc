"""
Snailfish reduce CLI

Reduces one snailfish number (or the sum of several) and prints the reduced
form and its magnitude. With --trace every rewrite is listed.

Examples:
  python3 -m snailfish.cli.reduce_cli "[[[[[9,8],1],2],3],4]"
  python3 -m snailfish.cli.reduce_cli --trace "[[[[[4,3],4],4],[7,[[8,4],9]]],[1,1]]"
  python3 -m snailfish.cli.reduce_cli --json "[[[[4,3],4],4],[7,[[8,4],9]]]" "[1,1]"
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from snailfish.core.parser import parse
from snailfish.core.tree import Arena, Tree
from snailfish.engine.arithmetic import add
from snailfish.errors import SnailfishError
from snailfish.json_versioning import maybe_add_schema_fields
from snailfish.trace import TraceResult, trace_reduce

SCHEMA_TAG = "snailfish-reduce.v1"
SCHEMA_DOC = "docs/schemas/reduce_schema.json"


def _run(numbers: List[str], max_steps: Optional[int]) -> TraceResult:
    arena = Arena()
    trees = [parse(n, arena) for n in numbers]
    acc = trees[0]
    for t in trees[1:-1]:
        acc = add(acc, t)
    # last addition is wrapped unreduced so the trace covers its reduction
    if len(trees) > 1:
        acc = Tree(arena, arena.new_pair(acc.root, trees[-1].root))
    return trace_reduce(acc, max_steps=max_steps)


def _print_human(tr: TraceResult, show_trace: bool) -> None:
    if show_trace:
        print(f"input:  {tr.input}")
        for s in tr.steps:
            vals = ",".join(str(v) for v in s.values)
            print(f"{s.i:>4}  {s.kind:<7} @{s.path or '.':<6} ({vals})  {s.value}")
    print(tr.result)
    print(f"magnitude: {tr.magnitude}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Reduce snailfish numbers.")
    parser.add_argument("numbers", nargs="*", help="Snailfish number(s); several are added left to right")
    parser.add_argument("--json", action="store_true", help="Emit JSON only")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--trace", action="store_true", help="List every rewrite")
    parser.add_argument("--max-steps", type=int, default=None, help="Fail if not reduced after N rewrites")
    parser.add_argument("--stdin", action="store_true", help="Read numbers from stdin, one per line")
    parser.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit")
    args = parser.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    numbers: List[str] = list(args.numbers)
    if args.stdin:
        numbers.extend(s.strip() for s in sys.stdin.read().splitlines() if s.strip())
    if not numbers:
        parser.error("at least one number is required (or --stdin)")

    try:
        tr = _run(numbers, args.max_steps)
    except SnailfishError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not args.json:
        _print_human(tr, show_trace=bool(args.trace))
        return 0

    payload: Dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "numbers": numbers,
        **tr.to_json_obj(),
    }
    if not args.trace:
        payload.pop("steps")
        payload["step_count"] = len(tr.steps)

    out = maybe_add_schema_fields(payload)
    if args.pretty:
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(out, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
