"""Two-valued boolean algebra for composing set predicates.

``and_``, ``or_`` and ``not_`` are the primitives. Every other
connective is defined through them so each law can be checked by
construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")
F = TypeVar("F")


def and_(a: bool, b: bool) -> bool:
    return b if a else False


def or_(a: bool, b: bool) -> bool:
    return True if a else b


def not_(a: bool) -> bool:
    return False if a else True


def xor(a: bool, b: bool) -> bool:
    return or_(and_(a, not_(b)), and_(not_(a), b))


def nand(a: bool, b: bool) -> bool:
    return not_(and_(a, b))


def nor(a: bool, b: bool) -> bool:
    return not_(or_(a, b))


def implies(a: bool, b: bool) -> bool:
    """Material implication: ¬A ∨ B."""
    return or_(not_(a), b)


def iff(a: bool, b: bool) -> bool:
    """Biconditional: (A → B) ∧ (B → A)."""
    return and_(implies(a, b), implies(b, a))


def is_true(a: bool) -> bool:
    return a is True


def is_false(a: bool) -> bool:
    return a is False


def all_true(values: Iterable[bool]) -> bool:
    """True unless some value is false; stops at the first false.

    An empty sequence is vacuously true.
    """
    for value in values:
        if not_(value):
            return False
    return True


def any_true(values: Iterable[bool]) -> bool:
    """False unless some value is true; stops at the first true.

    An empty sequence is false.
    """
    for value in values:
        if value:
            return True
    return False


def if_(condition: bool, when_true: T, when_false: F) -> T | F:
    """Pure ternary selection."""
    return when_true if condition else when_false


BINARY_CONNECTIVES = {
    "and": and_,
    "or": or_,
    "xor": xor,
    "nand": nand,
    "nor": nor,
    "implies": implies,
    "iff": iff,
}
