# snailfish/reduction/rules.py
"""
Snailfish rewrite rules.

Two rules, tried in strict priority order on every scan:

  explode  leftmost pair at depth >= EXPLODE_DEPTH whose children are both
           leaves. Its left value goes to the nearest leaf on the left, its
           right value to the nearest leaf on the right, and the pair
           becomes the leaf 0.
  split    leftmost leaf >= SPLIT_THRESHOLD. It becomes the pair
           [floor(x/2), ceil(x/2)].

The two searches are separate passes; a split is only looked for when no
explode is available anywhere in the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from snailfish.core.tree import Arena, NodeRef, iter_leaves, iter_pairs
from snailfish.errors import ReductionInvariantError

# root is depth 0
EXPLODE_DEPTH = 4
SPLIT_THRESHOLD = 10

EXPLODE = "explode"
SPLIT = "split"


@dataclass(frozen=True)
class Action:
    """One applied rewrite: which rule, which node, and the values it consumed."""

    kind: str
    node: NodeRef
    values: Tuple[int, ...]


# ---------- scanning ----------


def find_explode_target(arena: Arena, root: NodeRef) -> Optional[NodeRef]:
    for ref, depth in iter_pairs(arena, root):
        if depth >= EXPLODE_DEPTH and arena.regular_pair(ref) is not None:
            return ref
    return None


def find_split_target(arena: Arena, root: NodeRef) -> Optional[NodeRef]:
    for ref in iter_leaves(arena, root):
        if arena.value(ref) >= SPLIT_THRESHOLD:  # type: ignore[operator]
            return ref
    return None


def find_action(arena: Arena, root: NodeRef) -> Optional[Tuple[str, NodeRef]]:
    """(rule, target) for the next rewrite, or None when `root` is fully reduced."""
    target = find_explode_target(arena, root)
    if target is not None:
        return EXPLODE, target
    target = find_split_target(arena, root)
    if target is not None:
        return SPLIT, target
    return None


# ---------- neighbour search ----------


def leftmost_leaf(arena: Arena, ref: NodeRef) -> NodeRef:
    kids = arena.children(ref)
    while kids is not None:
        ref = kids[0]
        kids = arena.children(ref)
    return ref


def rightmost_leaf(arena: Arena, ref: NodeRef) -> NodeRef:
    kids = arena.children(ref)
    while kids is not None:
        ref = kids[1]
        kids = arena.children(ref)
    return ref


def nearest_left_leaf(arena: Arena, ref: NodeRef) -> Optional[NodeRef]:
    """
    The leaf immediately before `ref`'s subtree in left-to-right leaf order.

    Climb until we arrive at an ancestor from its right child; the answer is
    the rightmost leaf of that ancestor's left child.
    """
    cur = ref
    parent = arena.parent(cur)
    while parent is not None:
        left, _ = arena.children(parent)  # type: ignore[misc]
        if left != cur:
            return rightmost_leaf(arena, left)
        cur = parent
        parent = arena.parent(cur)
    return None


def nearest_right_leaf(arena: Arena, ref: NodeRef) -> Optional[NodeRef]:
    """Mirror image of nearest_left_leaf."""
    cur = ref
    parent = arena.parent(cur)
    while parent is not None:
        _, right = arena.children(parent)  # type: ignore[misc]
        if right != cur:
            return leftmost_leaf(arena, right)
        cur = parent
        parent = arena.parent(cur)
    return None


# ---------- rewrites ----------


def explode(arena: Arena, ref: NodeRef) -> Action:
    values = arena.regular_pair(ref)
    if values is None:
        raise ReductionInvariantError(f"explode target {ref} is not a regular pair")
    lv, rv = values

    left = nearest_left_leaf(arena, ref)
    if left is not None:
        arena.add_to_leaf(left, lv)
    right = nearest_right_leaf(arena, ref)
    if right is not None:
        arena.add_to_leaf(right, rv)

    arena.set_leaf(ref, 0)
    return Action(kind=EXPLODE, node=ref, values=(lv, rv))


def split(arena: Arena, ref: NodeRef) -> Action:
    x = arena.value(ref)
    if x is None:
        raise ReductionInvariantError(f"split target {ref} is a pair, not a leaf")
    if x < SPLIT_THRESHOLD:
        raise ReductionInvariantError(f"split target {ref} has value {x} < {SPLIT_THRESHOLD}")

    arena.set_pair(ref, x // 2, x - x // 2)
    return Action(kind=SPLIT, node=ref, values=(x,))


def apply_action(arena: Arena, kind: str, ref: NodeRef) -> Action:
    if kind == EXPLODE:
        return explode(arena, ref)
    if kind == SPLIT:
        return split(arena, ref)
    raise ReductionInvariantError(f"unknown rewrite rule: {kind!r}")
