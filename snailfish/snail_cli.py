"""
snail_cli.py

Umbrella CLI router for snailfish tools.

This file is intentionally thin and does not re-implement leaf flags.
It only routes:

  snail solve <...>    -> snailfish.cli.homework_cli.main(<...>)
  snail reduce <...>   -> snailfish.cli.reduce_cli.main(<...>)

Convenience alias:
  snail trace <...>    -> snail reduce --trace <...>

All remaining arguments are forwarded verbatim.
"""

from __future__ import annotations

import sys
from typing import List

HELP = """\
usage: snail <solve|reduce|trace> ...

Snailfish umbrella CLI (routes to the homework solver and the reducer).

commands:
  solve     Delegate to: python -m snailfish.cli.homework_cli ...
  reduce    Delegate to: python -m snailfish.cli.reduce_cli ...
  trace     Alias for:   reduce --trace

examples:
  python3 -m snailfish.snail_cli solve input/18.txt
  python3 -m snailfish.snail_cli solve --json --pretty --file input/18.txt
  python3 -m snailfish.snail_cli reduce "[[[[[9,8],1],2],3],4]"
  python3 -m snailfish.snail_cli trace "[[[[4,3],4],4],[7,[[8,4],9]]]" "[1,1]"
"""


def _help(code: int = 0) -> int:
    print(HELP)
    return code


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if not argv or argv[0] in ("-h", "--help", "help"):
        return _help(0)

    top, rest = argv[0], argv[1:]

    if top == "trace":
        top, rest = "reduce", ["--trace"] + rest

    if top == "solve":
        from snailfish.cli.homework_cli import main as homework_main

        return int(homework_main(rest))

    if top == "reduce":
        from snailfish.cli.reduce_cli import main as reduce_main

        return int(reduce_main(rest))

    print(f"snail: unknown command: {top!r}", file=sys.stderr)
    return _help(2)


if __name__ == "__main__":
    raise SystemExit(main())
