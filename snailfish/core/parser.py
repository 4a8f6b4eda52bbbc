"""
Snailfish number parser.

Grammar:
  Num := Digit+ | "[" Num "," Num "]"

No whitespace is accepted anywhere inside a number, and brackets nested
more than MAX_NESTING deep are rejected. Every pair's children
get their parent link the moment the pair is allocated.

A failed parse leaves no nodes behind: everything allocated since the
parse started is truncated from the arena before ParseError propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from snailfish.core.tree import Arena, NodeRef, Tree
from snailfish.errors import ParseError

_DIGITS = frozenset("0123456789")

# Deepest bracket nesting accepted. Render, magnitude and copy recurse once
# per level, so this keeps them well inside the interpreter's stack.
MAX_NESTING = 200


@dataclass(frozen=True)
class _Cursor:
    s: str
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.s)

    def peek(self) -> str:
        return "" if self.eof() else self.s[self.i]

    def consume(self, n: int = 1) -> "_Cursor":
        return _Cursor(self.s, self.i + n)

    def expect(self, ch: str) -> "_Cursor":
        if self.eof() or self.s[self.i] != ch:
            got = "EOF" if self.eof() else repr(self.s[self.i])
            raise ParseError(f"Expected {ch!r}, got {got}", self.s, self.i)
        return self.consume(1)


def parse(text: str, arena: Optional[Arena] = None) -> Tree:
    """
    Parse one snailfish number.

    With `arena` given the nodes are allocated there (so several numbers can
    later be added without copying); otherwise a fresh arena is used.
    Raises ParseError on invalid syntax.
    """
    if arena is None:
        arena = Arena()
    mark = len(arena)
    try:
        root, c = _parse_num(arena, _Cursor(text), 0)
        if not c.eof():
            raise ParseError(f"Trailing input {c.s[c.i :]!r}", text, c.i)
    except ParseError:
        arena.truncate(mark)
        raise
    return Tree(arena, root)


def parse_lines(text: str, arena: Optional[Arena] = None) -> List[Tree]:
    """Parse one number per non-blank line. Errors carry the 1-based line number."""
    if arena is None:
        arena = Arena()
    out: List[Tree] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        s = line.strip()
        if not s:
            continue
        try:
            out.append(parse(s, arena))
        except ParseError as e:
            raise ParseError(e.reason, e.text, e.pos, line=lineno) from e
    return out


def _parse_num(arena: Arena, c: _Cursor, depth: int) -> Tuple[NodeRef, _Cursor]:
    ch = c.peek()

    if ch == "[":
        if depth >= MAX_NESTING:
            raise ParseError(f"Nesting deeper than {MAX_NESTING}", c.s, c.i)
        c = c.consume(1)
        left, c = _parse_num(arena, c, depth + 1)
        c = c.expect(",")
        right, c = _parse_num(arena, c, depth + 1)
        c = c.expect("]")
        return arena.new_pair(left, right), c

    if ch in _DIGITS:
        start = c.i
        while c.peek() in _DIGITS:
            c = c.consume(1)
        return arena.new_leaf(int(c.s[start : c.i])), c

    got = "EOF" if c.eof() else repr(ch)
    raise ParseError(f"Expected digit or '[', got {got}", c.s, c.i)
