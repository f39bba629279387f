"""Tests for Cartesian product and power set."""

from finset.domain.combinatorics import (
    cartesian_product,
    iter_cartesian_product,
    power_set,
    power_set_size,
)
from finset.domain.types import EMPTY_SET, Mode, collection, sequence


class TestCartesianProduct:
    def test_pairs_in_order(self) -> None:
        result = cartesian_product(sequence(["a", "b"]), sequence([1, 2]))
        assert result.elements == (("a", 1), ("a", 2), ("b", 1), ("b", 2))

    def test_length_is_product(self) -> None:
        a, b = sequence([1, 2, 3]), sequence("xy")
        assert len(cartesian_product(a, b)) == len(a) * len(b)

    def test_empty_is_absorbing(self) -> None:
        assert len(cartesian_product(EMPTY_SET, sequence([1, 2]))) == 0
        assert len(cartesian_product(sequence([1, 2]), EMPTY_SET)) == 0

    def test_follows_first_mode(self) -> None:
        result = cartesian_product(collection([1]), sequence(["x", "x"]))
        assert result.mode is Mode.COLLECTION
        assert result.elements == ((1, "x"),)

    def test_iterator_is_lazy(self) -> None:
        pairs = iter_cartesian_product(sequence([1, 2]), sequence(["a"]))
        assert next(pairs) == (1, "a")
        assert list(pairs) == [(2, "a")]


class TestPowerSet:
    def test_order_by_size(self) -> None:
        subsets = [d.elements for d in power_set(sequence(["a", "b"]))]
        assert subsets == [(), ("a",), ("b",), ("a", "b")]

    def test_empty_domain(self) -> None:
        assert [d.elements for d in power_set(EMPTY_SET)] == [()]

    def test_count_includes_positional_duplicates(self) -> None:
        domain = sequence(["a", "a", "b"])
        subsets = list(power_set(domain))
        assert len(subsets) == 8
        assert power_set_size(domain) == 8

    def test_collection_uses_distinct_values(self) -> None:
        domain = collection(["a", "a", "b"])
        subsets = list(power_set(domain))
        assert len(subsets) == 4
        assert all(d.mode is Mode.COLLECTION for d in subsets)

    def test_contains_empty_and_whole(self) -> None:
        domain = sequence([1, 2, 3])
        subsets = list(power_set(domain))
        assert subsets[0] == EMPTY_SET
        assert subsets[-1] == domain

    def test_generator_is_single_pass(self) -> None:
        subsets = power_set(sequence([1]))
        assert len(list(subsets)) == 2
        assert list(subsets) == []

    def test_restarts_on_new_call(self) -> None:
        domain = sequence([1, 2])
        assert list(power_set(domain)) == list(power_set(domain))
