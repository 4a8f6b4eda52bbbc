"""
Reduction tracing.

Wraps the reducer's single-step API and records what every rewrite did,
so a reduction can be replayed or inspected without touching the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from snailfish.analyze import analyze_tree
from snailfish.core.tree import Tree, path_to
from snailfish.engine.arithmetic import magnitude
from snailfish.engine.reducer import is_reduced, step
from snailfish.errors import ReductionLimitError


@dataclass(frozen=True)
class TraceStep:
    i: int
    kind: str
    path: str
    values: List[int]
    value: str  # rendering after the rewrite
    nodes: int
    depth: int


@dataclass(frozen=True)
class TraceResult:
    input: str
    result: str
    magnitude: int
    steps: List[TraceStep] = field(default_factory=list)

    def to_json_obj(self) -> Dict[str, Any]:
        return {
            "input": self.input,
            "result": self.result,
            "magnitude": self.magnitude,
            "steps": [
                {
                    "i": s.i,
                    "kind": s.kind,
                    "path": s.path,
                    "values": list(s.values),
                    "value": s.value,
                    "nodes": s.nodes,
                    "depth": s.depth,
                }
                for s in self.steps
            ],
        }


def trace_reduce(tree: Tree, *, max_steps: Optional[int] = None) -> TraceResult:
    """
    Reduce `tree` in place, capturing one TraceStep per rewrite.

    The target path is taken before the rewrite; explode and split both keep
    the target node in place, so it stays valid afterwards.
    """
    before = tree.render()
    steps: List[TraceStep] = []

    i = 0
    while True:
        if max_steps is not None and i >= max_steps:
            if not is_reduced(tree):
                raise ReductionLimitError(max_steps)
            break
        action = step(tree)
        if action is None:
            break
        stats = analyze_tree(tree)
        steps.append(
            TraceStep(
                i=i,
                kind=action.kind,
                path=path_to(tree.arena, action.node),
                values=list(action.values),
                value=tree.render(),
                nodes=stats.nodes,
                depth=stats.depth,
            )
        )
        i += 1

    return TraceResult(
        input=before,
        result=tree.render(),
        magnitude=magnitude(tree),
        steps=steps,
    )
