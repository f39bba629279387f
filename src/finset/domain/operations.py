"""Core set operations over :class:`Domain` values.

All operations are total and pure. The result mode always follows the
first operand; the second operand only contributes its value domain
(or, for a Sequence-mode union, its elements in order).
"""

from __future__ import annotations

from collections.abc import Iterable

from finset.domain.types import Domain, Mode


def union(a: Domain, b: Domain) -> Domain:
    """A ∪ B.

    Sequence A: the elements of A followed by the elements of B,
    duplicates preserved. Collection A: the deduplicated union, with B
    coerced to its value set whatever its own mode.

    Examples:
        >>> from finset.domain.types import sequence
        >>> union(sequence(["a", "b"]), sequence(["c", "d"]))
        Sequence['a', 'b', 'c', 'd']
    """
    return Domain((*a.elements, *b.elements), a.mode)


def _filter_by_membership(a: Domain, b: Domain, *, keep_members: bool) -> Domain:
    """Stable filter of A against B's value domain."""
    members = b.key_set
    kept = (
        value
        for value, key in zip(a.elements, a.keys, strict=True)
        if (key in members) is keep_members
    )
    return Domain(kept, a.mode)


def intersection(a: Domain, b: Domain) -> Domain:
    """A ∩ B, keeping A's order and positions for Sequence mode."""
    return _filter_by_membership(a, b, keep_members=True)


def difference(a: Domain, b: Domain) -> Domain:
    """A \\ B, keeping A's order and positions for Sequence mode."""
    return _filter_by_membership(a, b, keep_members=False)


def symmetric_difference(a: Domain, b: Domain) -> Domain:
    """A △ B = (A \\ B) ∪ (B \\ A)."""
    return union(difference(a, b), difference(b, a))


def complement(universe: Domain, a: Domain) -> Domain:
    """Aᶜ relative to *universe*: U \\ A."""
    return difference(universe, a)


def union_all(domains: Iterable[Domain], mode: Mode = Mode.SEQUENCE) -> Domain:
    """Fold :func:`union` over *domains*, starting from an empty domain in *mode*."""
    result = Domain((), mode)
    for domain in domains:
        result = union(result, domain)
    return result
