"""
Reduction Fuzzer - property tests for parse/reduce/add/magnitude.

Properties:
1. render(parse(s)) == s for any well-formed number
2. reduce always terminates in a fully reduced tree (no pair nested 4 deep,
   no leaf >= 10) with consistent parent links
3. reduce is idempotent
4. split preserves the leaf sum; explode loses exactly the values that had
   no neighbour to land on
5. adding two reduced numbers yields a reduced number
"""

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from snailfish.analyze import analyze_tree
from snailfish.core.parser import parse
from snailfish.core.tree import Arena
from snailfish.engine.arithmetic import add, magnitude
from snailfish.engine.reducer import is_reduced, reduce, step
from snailfish.reduction.rules import (
    EXPLODE,
    find_action,
    nearest_left_leaf,
    nearest_right_leaf,
)
from snailfish.trace import trace_reduce

from conftest import assert_parent_links


# =============================================================================
# Strategies
# =============================================================================


def _pair(p) -> str:
    return f"[{p[0]},{p[1]}]"


def snail_text(max_leaf: int = 9, max_leaves: int = 16):
    """Any well-formed number, including a bare leaf."""
    return st.recursive(
        st.integers(min_value=0, max_value=max_leaf).map(str),
        lambda children: st.tuples(children, children).map(_pair),
        max_leaves=max_leaves,
    )


def snail_pairs(max_leaf: int = 9, max_leaves: int = 16):
    inner = snail_text(max_leaf=max_leaf, max_leaves=max_leaves // 2)
    return st.tuples(inner, inner).map(_pair)


def _reduced_below(levels: int):
    leaf = st.integers(min_value=0, max_value=9).map(str)
    if levels == 0:
        return leaf
    return st.one_of(leaf, st.tuples(_reduced_below(levels - 1), _reduced_below(levels - 1)).map(_pair))


# top pair at depth 0; pairs allowed down to depth 3
reduced_numbers = st.tuples(_reduced_below(3), _reduced_below(3)).map(_pair)

unreduced = snail_pairs(max_leaf=30, max_leaves=12)


# =============================================================================
# Parsing
# =============================================================================


@given(text=snail_text(max_leaf=999, max_leaves=24))
@settings(max_examples=300)
def test_round_trip(text):
    assert parse(text).render() == text


@given(text=snail_text(max_leaves=24))
@settings(max_examples=200)
def test_parse_sets_parent_links(text):
    assert_parent_links(parse(text))


@given(a=snail_text(max_leaves=10), b=snail_text(max_leaves=10))
@settings(max_examples=200)
def test_magnitude_is_weighted_fold(a, b):
    assert magnitude(parse(f"[{a},{b}]")) == 3 * magnitude(parse(a)) + 2 * magnitude(parse(b))


# =============================================================================
# Reduction
# =============================================================================


@given(text=unreduced)
@settings(max_examples=200, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_reduce_reaches_fully_reduced_tree(text):
    t = reduce(parse(text))
    stats = analyze_tree(t)
    assert is_reduced(t)
    assert stats.depth <= 4
    assert stats.max_leaf < 10
    assert_parent_links(t)


@given(text=unreduced)
@settings(max_examples=200, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_reduce_is_idempotent(text):
    once = reduce(parse(text)).render()
    assert reduce(parse(once)).render() == once


@given(text=reduced_numbers)
@settings(max_examples=200)
def test_reduced_numbers_are_fixpoints(text):
    t = parse(text)
    assert is_reduced(t)
    assert step(t) is None
    assert t.render() == text


@given(text=unreduced)
@settings(max_examples=100, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_leaf_sum_accounting(text):
    t = parse(text)
    while True:
        found = find_action(t.arena, t.root)
        if found is None:
            break
        kind, target = found
        before = sum(t.leaves())
        lost = 0
        if kind == EXPLODE:
            lv, rv = t.arena.regular_pair(target)
            if nearest_left_leaf(t.arena, target) is None:
                lost += lv
            if nearest_right_leaf(t.arena, target) is None:
                lost += rv
        step(t)
        assert sum(t.leaves()) == before - lost


@given(text=unreduced)
@settings(max_examples=100, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_trace_matches_plain_reduce(text):
    traced = trace_reduce(parse(text))
    plain = reduce(parse(text))
    assert traced.result == plain.render()
    assert traced.magnitude == magnitude(plain)
    if traced.steps:
        assert traced.steps[-1].value == traced.result


# =============================================================================
# Addition
# =============================================================================


@given(a=reduced_numbers, b=reduced_numbers)
@settings(max_examples=200, deadline=None)
def test_sum_of_reduced_numbers_is_reduced(a, b):
    arena = Arena()
    out = add(parse(a, arena), parse(b, arena))
    stats = analyze_tree(out)
    assert is_reduced(out)
    assert stats.depth <= 4
    assert stats.max_leaf < 10
    assert_parent_links(out)


@given(a=reduced_numbers, b=reduced_numbers)
@settings(max_examples=100, deadline=None)
def test_add_same_arena_and_cross_arena_agree(a, b):
    arena = Arena()
    shared = add(parse(a, arena), parse(b, arena)).render()
    crossed = add(parse(a), parse(b)).render()
    assert shared == crossed
