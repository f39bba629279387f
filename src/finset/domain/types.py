"""Domain values and their two representation modes.

A :class:`Domain` is a finite collection of comparable values held in one
of two modes:

- Sequence mode: ordered, duplicates preserved.
- Collection mode: value-unique, first occurrence keeps its position.

Every binary operation resolves mixed modes to the mode of its first
operand. Collection mode never depends on hash iteration order, so the
same inputs always produce the same element order.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from enum import StrEnum
from typing import Any


class Mode(StrEnum):
    """Representation mode of a domain value."""

    SEQUENCE = "sequence"
    COLLECTION = "collection"


class _BoolMarker:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<bool>"


_BOOL = _BoolMarker()


def element_key(value: Any) -> Hashable:
    """Return the comparison key for *value*.

    Booleans are kept apart from the integers ``0`` and ``1`` so that
    ``True`` and ``1`` are distinct elements, recursively inside tuples.

    Examples:
        >>> element_key(1) == element_key(True)
        False
        >>> element_key(("a", 1)) == element_key(("a", 1))
        True
    """
    if isinstance(value, bool):
        return (_BOOL, value)
    if isinstance(value, tuple):
        return tuple(element_key(item) for item in value)
    return value


def _ordered(values: Iterable[Any]) -> tuple[Any, ...]:
    # Plain sets carry no order of their own; fix one so results stay stable.
    if isinstance(values, (set, frozenset)):
        return tuple(sorted(values, key=lambda v: (type(v).__name__, repr(v))))
    return tuple(values)


class Domain:
    """Immutable finite set value in Sequence or Collection mode.

    Equality is representational: Sequence domains compare by ordered
    elements, Collection domains by their value set. Use
    :func:`finset.domain.predicates.equal` for set-semantic equality
    across modes.
    """

    __slots__ = ("_elements", "_keys", "_key_set", "_mode")

    def __init__(self, values: Iterable[Any] = (), mode: Mode = Mode.SEQUENCE) -> None:
        mode = Mode(mode)
        elements = _ordered(values)
        keys = tuple(element_key(v) for v in elements)
        if mode is Mode.COLLECTION:
            seen: set[Hashable] = set()
            unique: list[Any] = []
            unique_keys: list[Hashable] = []
            for value, key in zip(elements, keys, strict=True):
                if key in seen:
                    continue
                seen.add(key)
                unique.append(value)
                unique_keys.append(key)
            elements, keys = tuple(unique), tuple(unique_keys)
        object.__setattr__(self, "_mode", mode)
        object.__setattr__(self, "_elements", elements)
        object.__setattr__(self, "_keys", keys)
        object.__setattr__(self, "_key_set", frozenset(keys))

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def elements(self) -> tuple[Any, ...]:
        return self._elements

    @property
    def keys(self) -> tuple[Hashable, ...]:
        """Comparison keys, aligned with :attr:`elements`."""
        return self._keys

    @property
    def key_set(self) -> frozenset[Hashable]:
        """The value domain as a set of comparison keys."""
        return self._key_set

    def distinct(self) -> tuple[Any, ...]:
        """Distinct values in first-occurrence order."""
        if self._mode is Mode.COLLECTION:
            return self._elements
        return Domain(self._elements, Mode.COLLECTION).elements

    def with_mode(self, mode: Mode) -> Domain:
        """Return this domain re-expressed in *mode*."""
        if Mode(mode) is self._mode:
            return self
        return Domain(self._elements, mode)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, value: object) -> bool:
        try:
            return element_key(value) in self._key_set
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        if self._mode is not other._mode:
            return False
        if self._mode is Mode.SEQUENCE:
            return self._keys == other._keys
        return self._key_set == other._key_set

    def __hash__(self) -> int:
        if self._mode is Mode.SEQUENCE:
            return hash((self._mode, self._keys))
        return hash((self._mode, self._key_set))

    def __repr__(self) -> str:
        body = ", ".join(repr(v) for v in self._elements)
        if self._mode is Mode.SEQUENCE:
            return f"Sequence[{body}]"
        return f"Collection{{{body}}}"


def sequence(values: Iterable[Any] = ()) -> Domain:
    """Build a Sequence-mode domain."""
    return Domain(values, Mode.SEQUENCE)


def collection(values: Iterable[Any] = ()) -> Domain:
    """Build a Collection-mode domain."""
    return Domain(values, Mode.COLLECTION)


def empty_set(mode: Mode = Mode.SEQUENCE) -> Domain:
    return Domain((), mode)


EMPTY_SET = empty_set()


def singleton(value: Any, mode: Mode = Mode.SEQUENCE) -> Domain:
    """Domain holding exactly one value."""
    return Domain((value,), mode)


def as_domain(value: Domain | Iterable[Any]) -> Domain:
    """Coerce *value* to a :class:`Domain`.

    Domains pass through unchanged, ``set``/``frozenset`` become
    Collection mode, and any other iterable becomes Sequence mode.

    Raises:
        TypeError: If *value* is a string or not iterable.
    """
    if isinstance(value, Domain):
        return value
    if isinstance(value, (str, bytes)):
        msg = f"Cannot use {type(value).__name__} {value!r} as a domain"
        raise TypeError(msg)
    if isinstance(value, (set, frozenset)):
        return collection(value)
    if not isinstance(value, Iterable):
        msg = f"Cannot use {type(value).__name__} as a domain"
        raise TypeError(msg)
    return sequence(value)


def mode_of(domain: Domain) -> Mode:
    return domain.mode


def elements_of(domain: Domain) -> tuple[Any, ...]:
    """The flattened values of *domain* in representation order."""
    return domain.elements
