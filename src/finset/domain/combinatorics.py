"""Cartesian product and power set.

Both are combinatorial (n×m and 2ⁿ), so each has a lazy producer. A
producer is finite and cannot be rewound; call it again to restart.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import combinations
from typing import Any

from finset.domain.types import Domain


def iter_cartesian_product(a: Domain, b: Domain) -> Iterator[tuple[Any, Any]]:
    """Yield ``(x, y)`` for x in A, y in B; y varies fastest."""
    for left in a.elements:
        for right in b.elements:
            yield (left, right)


def cartesian_product(a: Domain, b: Domain) -> Domain:
    """A × B in the mode of A.

    Examples:
        >>> from finset.domain.types import sequence
        >>> cartesian_product(sequence(["a", "b"]), sequence([1, 2]))
        Sequence[('a', 1), ('a', 2), ('b', 1), ('b', 2)]
    """
    return Domain(iter_cartesian_product(a, b), a.mode)


def power_set(a: Domain) -> Iterator[Domain]:
    """Lazily yield every sub-domain of A, from ∅ up to A itself.

    Subsets come in increasing size, then in positional order. For
    Sequence mode they are sub-sequences chosen by position, so exactly
    ``2 ** len(a)`` domains are produced. Every subset keeps A's mode.
    """
    pool = a.elements
    for width in range(len(pool) + 1):
        for chosen in combinations(pool, width):
            yield Domain(chosen, a.mode)


def power_set_size(a: Domain) -> int:
    """Number of domains :func:`power_set` yields for A."""
    return 2 ** len(a.elements)
