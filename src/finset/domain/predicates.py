"""Decision predicates and cardinality over :class:`Domain` values.

Predicates compare value domains only: order and multiplicity never
matter, and mixed modes are compared by value.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable

from pydantic import BaseModel, NonNegativeInt

from finset.domain.operations import intersection
from finset.domain.types import Domain, Mode


def subset(a: Domain, b: Domain) -> bool:
    """A ⊆ B: every distinct value of A occurs in B."""
    return a.key_set <= b.key_set


def equal(a: Domain, b: Domain) -> bool:
    """A = B as value domains."""
    return subset(a, b) and subset(b, a)


# Alias kept for callers composing predicates with the logic layer.
equale = equal


def is_empty(a: Domain) -> bool:
    return not a.key_set


def is_disjoint(a: Domain, b: Domain) -> bool:
    """A ∩ B = ∅."""
    return is_empty(intersection(a, b))


class Count(BaseModel):
    """Result of :func:`cardinality`.

    Sequence mode knows its exact length. Collection mode only tracks
    distinctness, so its count is reported as some non-negative integer
    (``exact`` is None) until the collection is measured directly.
    """

    model_config = {"frozen": True}

    mode: Mode
    exact: NonNegativeInt | None = None

    @property
    def is_exact(self) -> bool:
        return self.exact is not None


def cardinality(a: Domain) -> Count:
    """|A|: exact for Sequence mode, opaque for Collection mode."""
    if a.mode is Mode.SEQUENCE:
        return Count(mode=a.mode, exact=len(a))
    return Count(mode=a.mode)


def size(a: Domain) -> Count:
    """Deprecated alias of :func:`cardinality`."""
    warnings.warn(
        "size() is deprecated; use cardinality() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return cardinality(a)


def is_disjoint_union(a: Domain, b: Domain, c: Domain | None = None) -> bool:
    """Pairwise disjointness of two or three domains."""
    if c is None:
        return is_disjoint(a, b)
    return is_disjoint(a, b) and is_disjoint(a, c) and is_disjoint(b, c)


def are_all_disjoint(domains: Iterable[Domain]) -> bool:
    """True if each domain is disjoint from every domain after it.

    Zero or one domain is trivially disjoint.
    """
    remaining = list(domains)
    while len(remaining) > 1:
        head, tail = remaining[0], remaining[1:]
        for other in tail:
            if not is_disjoint(head, other):
                return False
        remaining = tail
    return True
