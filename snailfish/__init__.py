# snailfish/__init__.py
"""
Snailfish number arithmetic — public API surface.

    - Tree store: Arena, Tree, render
    - Parsing: parse, parse_lines
    - Reduction: reduce, step, is_reduced
    - Arithmetic: add, add_all, magnitude
    - Homework driver: solve, part1, part2, format_answers
    - Errors: SnailfishError, ParseError, ConsumedTreeError,
              ReductionLimitError, ReductionInvariantError
"""

from __future__ import annotations

from .core.tree import Arena, Tree, render
from .core.parser import parse, parse_lines
from .engine.reducer import is_reduced, reduce, step
from .engine.arithmetic import add, add_all, magnitude
from .homework import HomeworkAnswers, format_answers, part1, part2, solve
from .errors import (
    ConsumedTreeError,
    ParseError,
    ReductionInvariantError,
    ReductionLimitError,
    SnailfishError,
)

__all__ = [
    "Arena",
    "Tree",
    "render",
    "parse",
    "parse_lines",
    "reduce",
    "step",
    "is_reduced",
    "add",
    "add_all",
    "magnitude",
    "HomeworkAnswers",
    "solve",
    "part1",
    "part2",
    "format_answers",
    "SnailfishError",
    "ParseError",
    "ConsumedTreeError",
    "ReductionLimitError",
    "ReductionInvariantError",
]
