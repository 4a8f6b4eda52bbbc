"""
Structural analysis over snailfish trees.

Read-only: no mutation, no reduction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from snailfish.core.tree import Arena, NodeRef, Tree


@dataclass(frozen=True)
class TreeStats:
    nodes: int
    leaves: int
    depth: int  # deepest pair nesting; a bare leaf is 0
    max_leaf: int


def analyze_tree(tree: Tree) -> TreeStats:
    def walk(arena: Arena, ref: NodeRef) -> Tuple[int, int, int, int]:
        kids = arena.children(ref)
        if kids is None:
            return 1, 1, 0, arena.value(ref)  # type: ignore[return-value]
        ln, ll, ld, lm = walk(arena, kids[0])
        rn, rl, rd, rm = walk(arena, kids[1])
        return 1 + ln + rn, ll + rl, 1 + max(ld, rd), max(lm, rm)

    n, leaves, d, m = walk(tree.arena, tree.root)
    return TreeStats(nodes=n, leaves=leaves, depth=d, max_leaf=m)
