"""Sum types: tagged values, disjoint unions, and exhaustive matchers.

A :class:`DisjointUnion` maps a fixed alphabet of tags to domains. Its
realized values are every ``TaggedValue(tag, v)`` with ``v`` drawn from
that tag's domain. A tag with an empty domain is still a valid case
(uninhabited variant); its only instance carries ``None`` as payload.

:class:`PatternMatcher` enforces exhaustiveness when it is built, never
when a particular tag is matched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from itertools import combinations
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from finset.domain.predicates import is_disjoint
from finset.domain.types import EMPTY_SET, Domain, as_domain, element_key

# --- Errors ---


class SumTypeError(ValueError):
    """Base error for malformed sum-type construction or use."""


class NonExhaustiveMatchError(SumTypeError):
    """A matcher is missing handlers for tags of its union."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing handlers for tags: {', '.join(self.missing)}")


class UnknownTagError(SumTypeError):
    """A tag is not part of the union."""

    def __init__(self, tags: Iterable[str]) -> None:
        self.tags = tuple(tags)
        super().__init__(f"Unknown tags: {', '.join(self.tags)}")


class MatchResultTypeError(SumTypeError, TypeError):
    """A handler returned a value outside the matcher's result type."""


# --- Tagged values ---


class TaggedValue(BaseModel):
    """Immutable ``(tag, value)`` pair."""

    model_config = {"frozen": True}

    tag: str
    value: Any = None

    def __init__(self, tag: str, value: Any = None) -> None:
        super().__init__(tag=tag, value=value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaggedValue):
            return NotImplemented
        return self.tag == other.tag and element_key(self.value) == element_key(other.value)

    def __hash__(self) -> int:
        return hash((self.tag, element_key(self.value)))

    def __repr__(self) -> str:
        return f"TaggedValue({self.tag!r}, {self.value!r})"


def extract_tag(tagged: TaggedValue) -> str:
    return tagged.tag


def extract_value(tagged: TaggedValue) -> Any:
    return tagged.value


# --- Disjoint unions ---


def _check_tag(tag: object) -> str:
    if not isinstance(tag, str):
        msg = f"Tags must be strings, got {type(tag).__name__}"
        raise TypeError(msg)
    if not tag:
        msg = "Tags must not be empty"
        raise ValueError(msg)
    return tag


class DisjointUnion(Mapping[str, Domain]):
    """Immutable tag → domain mapping describing a sum type.

    Tags are kept in sorted order, so the insertion order of the input
    mapping never affects iteration, variants, or equality.
    """

    __slots__ = ("_domains", "_name")

    def __init__(
        self,
        domains: Mapping[str, Domain | Iterable[Any]],
        *,
        name: str | None = None,
    ) -> None:
        checked = {_check_tag(tag): as_domain(dom) for tag, dom in domains.items()}
        self._domains = MappingProxyType({tag: checked[tag] for tag in sorted(checked)})
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._domains)

    def __getitem__(self, tag: str) -> Domain:
        return self._domains[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __repr__(self) -> str:
        label = self._name or "DisjointUnion"
        body = ", ".join(f"{tag}: {dom!r}" for tag, dom in self._domains.items())
        return f"{label}({{{body}}})"

    def variants(self) -> Iterator[TaggedValue]:
        """Yield every realized tagged value, tag by tag."""
        for tag, domain in self._domains.items():
            for value in domain.distinct():
                yield TaggedValue(tag, value)

    def uninhabited_tags(self) -> tuple[str, ...]:
        """Tags whose domain is empty."""
        return tuple(tag for tag, domain in self._domains.items() if not domain.key_set)

    def admits(self, tagged: TaggedValue) -> bool:
        """True if *tagged* is a value of this sum type."""
        domain = self._domains.get(tagged.tag)
        if domain is None:
            return False
        if not domain.key_set:
            return tagged.value is None
        return tagged.value in domain


def disjoint_union(
    domains: Mapping[str, Domain | Iterable[Any]], *, name: str | None = None
) -> DisjointUnion:
    return DisjointUnion(domains, name=name)


def filter_by_tag(union: DisjointUnion, tag: str) -> tuple[TaggedValue, ...]:
    """Tagged values of *union* carrying *tag*; empty if the tag is absent."""
    if tag not in union:
        return ()
    return tuple(TaggedValue(tag, value) for value in union[tag].distinct())


def are_pairwise_disjoint(domains: Mapping[str, Domain]) -> bool:
    """True if every pair of distinct names maps to disjoint domains."""
    for left, right in combinations(domains, 2):
        if not is_disjoint(domains[left], domains[right]):
            return False
    return True


def overlapping_pairs(domains: Mapping[str, Domain]) -> list[tuple[str, str]]:
    """Every pair of distinct names whose domains share a value."""
    return [
        (left, right)
        for left, right in combinations(domains, 2)
        if not is_disjoint(domains[left], domains[right])
    ]


# --- Pattern matching ---

R = TypeVar("R")


class PatternMatcher(Generic[R]):
    """Total mapping from every tag of a union to a handler.

    Construction fails with :class:`NonExhaustiveMatchError` if any tag
    lacks a handler, and with :class:`UnknownTagError` if a handler names
    a tag outside the union. There is no catch-all handler.

    Usage::

        matcher = PatternMatcher(
            result_union(sequence(["done"]), sequence(["timeout"])),
            {"success": lambda v: 0, "error": lambda v: 1},
            result_type=int,
        )
        matcher(ok("done"))  # 0
    """

    __slots__ = ("_handlers", "_result_type", "_union")

    def __init__(
        self,
        union: DisjointUnion,
        handlers: Mapping[str, Callable[[Any], R]],
        *,
        result_type: type[R] | None = None,
    ) -> None:
        missing = [tag for tag in union.tags if tag not in handlers]
        if missing:
            raise NonExhaustiveMatchError(missing)
        unknown = sorted(tag for tag in handlers if tag not in union)
        if unknown:
            raise UnknownTagError(unknown)
        for tag, handler in handlers.items():
            if not callable(handler):
                msg = f"Handler for tag {tag!r} is not callable"
                raise TypeError(msg)
        self._union = union
        self._handlers: Mapping[str, Callable[[Any], R]] = MappingProxyType(dict(handlers))
        self._result_type = result_type

    @property
    def union(self) -> DisjointUnion:
        return self._union

    def handler_for(self, tag: str) -> Callable[[Any], R]:
        if tag not in self._handlers:
            raise UnknownTagError([tag])
        return self._handlers[tag]

    def __call__(self, tagged: TaggedValue) -> R:
        """Dispatch *tagged* to the handler of its tag.

        Raises:
            UnknownTagError: If the tag is not part of the union.
            ValueError: If the value is outside the tag's domain.
            MatchResultTypeError: If the handler's result is not a *result_type*.
        """
        if tagged.tag not in self._union:
            raise UnknownTagError([tagged.tag])
        if not self._union.admits(tagged):
            msg = f"Value {tagged.value!r} is not in the domain of tag {tagged.tag!r}"
            raise ValueError(msg)
        result = self._handlers[tagged.tag](tagged.value)
        if self._result_type is not None and not isinstance(result, self._result_type):
            msg = (
                f"Handler for tag {tagged.tag!r} returned {type(result).__name__}, "
                f"expected {self._result_type.__name__}"
            )
            raise MatchResultTypeError(msg)
        return result

    def match_all(self) -> list[tuple[TaggedValue, R]]:
        """Apply the matcher to every realized variant of the union."""
        return [(tagged, self(tagged)) for tagged in self._union.variants()]


# --- Named specializations ---

SUCCESS = "success"
ERROR = "error"
SOME = "some"
NONE = "none"


def result_union(success: Domain | Iterable[Any], error: Domain | Iterable[Any]) -> DisjointUnion:
    """Result(S, E) = DisjointUnion({success: S, error: E})."""
    return DisjointUnion({SUCCESS: success, ERROR: error}, name="Result")


def option_union(domain: Domain | Iterable[Any]) -> DisjointUnion:
    """Option(T) = DisjointUnion({some: T, none: ∅})."""
    return DisjointUnion({SOME: domain, NONE: EMPTY_SET}, name="Option")


def state_machine(states: Mapping[str, Domain | Iterable[Any]]) -> DisjointUnion:
    """StateMachine(states) = DisjointUnion(states)."""
    return DisjointUnion(states, name="StateMachine")


def ok(value: Any) -> TaggedValue:
    return TaggedValue(SUCCESS, value)


def err(value: Any) -> TaggedValue:
    return TaggedValue(ERROR, value)


def some(value: Any) -> TaggedValue:
    return TaggedValue(SOME, value)


NOTHING = TaggedValue(NONE)
