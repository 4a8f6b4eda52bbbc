# snailfish/engine/arithmetic.py
"""
Snailfish addition and magnitude.

Addition consumes both operands: their roots become the two children of a
new pair, so neither can be used as a standalone number afterwards. Parse
(or clone) again if the same value is needed twice.

The one exception is a right operand living in another arena. It is copied
into the left operand's arena and the original stays valid.
"""

from __future__ import annotations

from typing import Iterable

from snailfish.core.tree import Arena, NodeRef, Tree
from snailfish.engine.reducer import reduce
from snailfish.errors import ConsumedTreeError


def add(a: Tree, b: Tree) -> Tree:
    """[a,b], reduced."""
    if a.consumed:
        raise ConsumedTreeError("left operand was already added into another number")
    if b.consumed:
        raise ConsumedTreeError("right operand was already added into another number")
    if a.root == b.root and a.arena is b.arena:
        raise ConsumedTreeError("cannot add a number to itself; clone it first")

    arena = a.arena
    right = b.root
    if b.arena is not arena:
        # b is copied into a's arena; b's own arena is left untouched
        right = arena.copy_from(b.arena, b.root)

    top = arena.new_pair(a.root, right)
    return reduce(Tree(arena, top))


def add_all(trees: Iterable[Tree]) -> Tree:
    """Left fold of `add` over `trees`."""
    it = iter(trees)
    try:
        acc = next(it)
    except StopIteration:
        raise ValueError("add_all() needs at least one number") from None
    for t in it:
        # drop the nodes orphaned by this round of explodes
        acc = add(acc, t).clone()
    return acc


def _magnitude(arena: Arena, ref: NodeRef) -> int:
    kids = arena.children(ref)
    if kids is None:
        return arena.value(ref)  # type: ignore[return-value]
    return 3 * _magnitude(arena, kids[0]) + 2 * _magnitude(arena, kids[1])


def magnitude(tree: Tree) -> int:
    return _magnitude(tree.arena, tree.root)
