# snailfish/homework.py
"""
Homework driver.

  part 1: magnitude of the left-fold sum of every number in the list
  part 2: largest magnitude of a + b over every ordered pair of distinct
          list positions

Addition consumes its operands, so part 2 parses both numbers fresh for
every pair. Each pair gets its own arena, which is dropped afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from snailfish.core.parser import parse, parse_lines
from snailfish.core.tree import Arena, Tree
from snailfish.engine.arithmetic import add, add_all, magnitude


@dataclass(frozen=True)
class HomeworkAnswers:
    part1: int
    part2: int


def homework_lines(text: str) -> List[str]:
    """Non-blank, stripped lines of `text`."""
    return [s for s in (line.strip() for line in text.splitlines()) if s]


def sum_homework(lines: Sequence[str]) -> Tree:
    trees = parse_lines("\n".join(lines), Arena())
    if not trees:
        raise ValueError("homework is empty")
    return add_all(trees)


def part1(lines: Sequence[str]) -> int:
    return magnitude(sum_homework(lines))


def pair_magnitude(a: str, b: str) -> int:
    arena = Arena()
    return magnitude(add(parse(a, arena), parse(b, arena)))


def part2(lines: Sequence[str]) -> int:
    if len(lines) < 2:
        raise ValueError("part 2 needs at least two numbers")

    # validate every line once up front so errors carry a line number
    parse_lines("\n".join(lines))

    best = 0
    for i, a in enumerate(lines):
        for j, b in enumerate(lines):
            if i == j:
                continue
            best = max(best, pair_magnitude(a, b))
    return best


def solve(text: str) -> HomeworkAnswers:
    lines = homework_lines(text)
    return HomeworkAnswers(part1=part1(lines), part2=part2(lines))


def format_answers(answers: HomeworkAnswers) -> str:
    return f"part 1: {answers.part1}\npart 2: {answers.part2}"
