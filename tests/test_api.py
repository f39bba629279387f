"""Tests for the top-level package API."""

import finset


def test_all_names_resolve() -> None:
    for name in finset.__all__:
        assert hasattr(finset, name), name


def test_quick_tour() -> None:
    states = finset.state_machine(
        {"idle": finset.EMPTY_SET, "busy": finset.sequence([1, 2])},
    )
    matcher = finset.PatternMatcher(states, {"idle": lambda _: 0, "busy": lambda v: v})
    assert [result for _, result in matcher.match_all()] == [1, 2]
    assert finset.union_all([finset.sequence([1]), finset.collection([2])]).elements == (1, 2)
