# snailfish/engine/reducer.py
"""
Fixpoint driver for the snailfish rewrite rules.

    step(tree)    apply exactly one rewrite (or none) and report it
    reduce(tree)  step until nothing applies; mutates and returns `tree`

Rule selection lives in snailfish.reduction.rules; this module only loops.
"""

from __future__ import annotations

from typing import Optional

from snailfish.core.tree import Tree
from snailfish.errors import ReductionLimitError
from snailfish.reduction.rules import Action, apply_action, find_action


def step(tree: Tree) -> Optional[Action]:
    found = find_action(tree.arena, tree.root)
    if found is None:
        return None
    kind, target = found
    return apply_action(tree.arena, kind, target)


def reduce(tree: Tree, *, max_steps: Optional[int] = None) -> Tree:
    """
    Rewrite `tree` in place until it is fully reduced.

    `max_steps` is a debugging cap; ReductionLimitError is raised if it is
    reached while a rewrite is still pending.
    """
    steps = 0
    while True:
        if max_steps is not None and steps >= max_steps:
            if find_action(tree.arena, tree.root) is None:
                return tree
            raise ReductionLimitError(max_steps)
        if step(tree) is None:
            return tree
        steps += 1


def is_reduced(tree: Tree) -> bool:
    return find_action(tree.arena, tree.root) is None
