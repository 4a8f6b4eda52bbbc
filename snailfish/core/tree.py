"""
Snailfish tree store
====================
A snailfish number is a binary tree: leaves hold integers, pairs hold two
children. Every node also knows its parent so the rewrite rules can walk
upward to find neighbouring leaves.

All nodes live in an Arena and are addressed by integer index (NodeRef).
The arena owns the memory; a parent index is plain data, not an ownership
edge, so there is nothing to reference-count and no cycle to break.

A node is rewritten in place (leaf -> pair on split, pair -> leaf on
explode). Its index, and therefore its parent's reference to it, never
changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from snailfish.errors import ReductionInvariantError

NodeRef = int


@dataclass
class Node:
    """Leaf when `value` is set, pair when `left`/`right` are set."""

    value: Optional[int] = None
    left: Optional[NodeRef] = None
    right: Optional[NodeRef] = None
    parent: Optional[NodeRef] = None

    def is_leaf(self) -> bool:
        return self.value is not None

    def is_pair(self) -> bool:
        return self.value is None


class Arena:
    """
    Owns every node of one or more trees.

    Nodes are never freed individually: an explode leaves its two old
    children behind as unreachable entries. `Tree.clone()` copies only the
    reachable nodes into a fresh arena, which is how `add_all` keeps a long
    running sum from accumulating them.
    """

    def __init__(self):
        self.nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self.nodes)

    # ---------- allocation ----------

    def new_leaf(self, value: int, parent: Optional[NodeRef] = None) -> NodeRef:
        self.nodes.append(Node(value=value, parent=parent))
        return len(self.nodes) - 1

    def new_pair(
        self,
        left: NodeRef,
        right: NodeRef,
        parent: Optional[NodeRef] = None,
    ) -> NodeRef:
        """Allocate a pair over two existing nodes and point them back at it."""
        ref = len(self.nodes)
        self.nodes.append(Node(left=left, right=right, parent=parent))
        self.nodes[left].parent = ref
        self.nodes[right].parent = ref
        return ref

    def truncate(self, size: int) -> None:
        """Drop every node allocated after the arena had `size` nodes."""
        del self.nodes[size:]

    # ---------- queries ----------

    def node(self, ref: NodeRef) -> Node:
        return self.nodes[ref]

    def is_leaf(self, ref: NodeRef) -> bool:
        return self.nodes[ref].is_leaf()

    def value(self, ref: NodeRef) -> Optional[int]:
        return self.nodes[ref].value

    def parent(self, ref: NodeRef) -> Optional[NodeRef]:
        return self.nodes[ref].parent

    def children(self, ref: NodeRef) -> Optional[Tuple[NodeRef, NodeRef]]:
        n = self.nodes[ref]
        if n.is_leaf():
            return None
        return n.left, n.right  # type: ignore[return-value]

    def regular_pair(self, ref: NodeRef) -> Optional[Tuple[int, int]]:
        """Values of a pair whose two children are both leaves, else None."""
        kids = self.children(ref)
        if kids is None:
            return None
        lv = self.nodes[kids[0]].value
        rv = self.nodes[kids[1]].value
        if lv is None or rv is None:
            return None
        return lv, rv

    # ---------- in-place rewrites ----------

    def set_leaf(self, ref: NodeRef, value: int) -> None:
        """Turn `ref` into a leaf, keeping its parent link."""
        n = self.nodes[ref]
        n.value = value
        n.left = None
        n.right = None

    def add_to_leaf(self, ref: NodeRef, amount: int) -> None:
        n = self.nodes[ref]
        if n.value is None:
            raise ReductionInvariantError(f"node {ref} is a pair, not a leaf")
        n.value += amount

    def set_pair(self, ref: NodeRef, left_value: int, right_value: int) -> None:
        """Turn `ref` into a pair of two fresh leaves, keeping its parent link."""
        left = self.new_leaf(left_value, parent=ref)
        right = self.new_leaf(right_value, parent=ref)
        n = self.nodes[ref]
        n.value = None
        n.left = left
        n.right = right

    # ---------- copying ----------

    def copy_from(self, src: "Arena", ref: NodeRef) -> NodeRef:
        """Deep-copy the subtree at `src[ref]` into this arena; return the new root."""
        kids = src.children(ref)
        if kids is None:
            return self.new_leaf(src.nodes[ref].value)  # type: ignore[arg-type]
        left = self.copy_from(src, kids[0])
        right = self.copy_from(src, kids[1])
        return self.new_pair(left, right)


# ---------- traversal ----------


def iter_leaves(arena: Arena, ref: NodeRef) -> Iterator[NodeRef]:
    """Leaves under `ref` in left-to-right order."""
    stack = [ref]
    while stack:
        cur = stack.pop()
        kids = arena.children(cur)
        if kids is None:
            yield cur
        else:
            stack.append(kids[1])
            stack.append(kids[0])


def iter_pairs(arena: Arena, ref: NodeRef) -> Iterator[Tuple[NodeRef, int]]:
    """(pair, depth) under `ref` in depth-first, left-to-right order; `ref` is depth 0."""
    stack = [(ref, 0)]
    while stack:
        cur, depth = stack.pop()
        kids = arena.children(cur)
        if kids is None:
            continue
        yield cur, depth
        stack.append((kids[1], depth + 1))
        stack.append((kids[0], depth + 1))


def path_to(arena: Arena, ref: NodeRef) -> str:
    """Route from the tree's root down to `ref` as a string of 'L'/'R'."""
    steps: List[str] = []
    cur = ref
    parent = arena.parent(cur)
    while parent is not None:
        steps.append("L" if arena.node(parent).left == cur else "R")
        cur = parent
        parent = arena.parent(cur)
    return "".join(reversed(steps))


def render_node(arena: Arena, ref: NodeRef) -> str:
    kids = arena.children(ref)
    if kids is None:
        return str(arena.value(ref))
    return "[" + render_node(arena, kids[0]) + "," + render_node(arena, kids[1]) + "]"


# ---------- tree handle ----------


class Tree:
    """A root node inside an arena. The root's parent must be None."""

    __slots__ = ("arena", "root")

    def __init__(self, arena: Arena, root: NodeRef):
        self.arena = arena
        self.root = root

    @property
    def consumed(self) -> bool:
        """True once the root was folded under a new pair by `add`."""
        return self.arena.parent(self.root) is not None

    def render(self) -> str:
        return render_node(self.arena, self.root)

    def clone(self) -> "Tree":
        """Deep copy into a fresh arena."""
        arena = Arena()
        return Tree(arena, arena.copy_from(self.arena, self.root))

    def leaves(self) -> List[int]:
        return [self.arena.value(r) for r in iter_leaves(self.arena, self.root)]  # type: ignore[misc]

    # ---------- structural identity ----------

    def structurally_equal(self, other) -> bool:
        if not isinstance(other, Tree):
            return False
        return self.render() == other.render()

    __eq__ = structurally_equal
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Tree({self.render()})"


def render(tree: Tree) -> str:
    return tree.render()
