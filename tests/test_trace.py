import pytest

from snailfish.analyze import TreeStats, analyze_tree
from snailfish.core.parser import parse
from snailfish.errors import ReductionLimitError
from snailfish.trace import trace_reduce


def test_analyze_leaf():
    assert analyze_tree(parse("7")) == TreeStats(nodes=1, leaves=1, depth=0, max_leaf=7)


def test_analyze_nested():
    stats = analyze_tree(parse("[[1,[2,13]],4]"))
    assert stats == TreeStats(nodes=7, leaves=4, depth=3, max_leaf=13)


def test_trace_records_every_rewrite():
    tr = trace_reduce(parse("[[[[[4,3],4],4],[7,[[8,4],9]]],[1,1]]"))
    assert tr.input == "[[[[[4,3],4],4],[7,[[8,4],9]]],[1,1]]"
    assert tr.result == "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"
    assert tr.magnitude == 1384
    assert [(s.kind, s.path, s.values) for s in tr.steps] == [
        ("explode", "LLLL", [4, 3]),
        ("explode", "LRRL", [8, 4]),
        ("split", "LRL", [15]),
        ("split", "LRRR", [13]),
        ("explode", "LRRR", [6, 7]),
    ]
    assert [s.i for s in tr.steps] == [0, 1, 2, 3, 4]


def test_trace_step_stats():
    tr = trace_reduce(parse("[[[[[9,8],1],2],3],4]"))
    (only,) = tr.steps
    assert only.value == "[[[[0,9],2],3],4]"
    assert only.nodes == 9
    assert only.depth == 4


def test_trace_of_reduced_number_is_empty():
    tr = trace_reduce(parse("[[1,2],[[3,4],5]]"))
    assert tr.steps == []
    assert tr.result == tr.input
    assert tr.magnitude == 143


def test_trace_max_steps():
    with pytest.raises(ReductionLimitError):
        trace_reduce(parse("[[[[[4,3],4],4],[7,[[8,4],9]]],[1,1]]"), max_steps=3)
    tr = trace_reduce(parse("[[[[[4,3],4],4],[7,[[8,4],9]]],[1,1]]"), max_steps=5)
    assert len(tr.steps) == 5


def test_trace_json_obj():
    obj = trace_reduce(parse("[[[[[9,8],1],2],3],4]")).to_json_obj()
    assert set(obj) == {"input", "result", "magnitude", "steps"}
    assert obj["steps"][0]["kind"] == "explode"
    assert obj["steps"][0]["path"] == "LLLL"
