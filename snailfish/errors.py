"""
Snailfish error taxonomy.

- ParseError: bad bracket text. Fatal to the line being parsed.
- ConsumedTreeError: a tree was handed to `add` after it had already been
  folded into another tree.
- ReductionLimitError: the optional step cap on `reduce` was hit.
- ReductionInvariantError: the rewrite rules were asked to act on a node
  that cannot be acted on. This is a programming error, never recovered.
"""

from __future__ import annotations

from typing import Optional


class SnailfishError(Exception):
    """Base class for everything the engine raises on purpose."""


class ParseError(SnailfishError, ValueError):
    """Malformed snailfish number text."""

    def __init__(
        self,
        reason: str,
        text: str = "",
        pos: int = 0,
        *,
        line: Optional[int] = None,
    ):
        self.reason = reason
        self.text = text
        self.pos = pos
        self.line = line
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f"{prefix}{reason} at pos {pos}")


class ConsumedTreeError(SnailfishError, ValueError):
    """A tree whose root already has a parent was used as a standalone number."""


class ReductionLimitError(SnailfishError, RuntimeError):
    """`reduce` ran past its `max_steps` budget."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"reduction did not reach a fixpoint within {max_steps} steps")


class ReductionInvariantError(SnailfishError, AssertionError):
    """Explode/split applied to an illegal target."""
