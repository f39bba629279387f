"""JSON literal codec for domain values.

Wire shape:
- a JSON array is a Sequence-mode domain: ``["a", "b", "a"]``
- an object with a single ``collection`` key is a Collection-mode domain:
  ``{"collection": [2, 4, 6]}``
- arrays and objects nested inside a domain are nested domains
- scalars are strings, numbers, or booleans; ``null`` is rejected
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from finset.domain.tagged import TaggedValue
from finset.domain.types import Domain, Mode

COLLECTION_KEY = "collection"


class CodecError(ValueError):
    """A literal could not be decoded into a domain."""


def decode_value(raw: Any) -> Any:
    """Decode one element of a domain literal."""
    if isinstance(raw, (list, dict)):
        return decode_domain(raw)
    if isinstance(raw, (str, int, float, bool)):
        return raw
    msg = f"Unsupported element {raw!r}: expected string, number, boolean, or nested domain"
    raise CodecError(msg)


def decode_domain(raw: Any) -> Domain:
    """Decode already-parsed JSON (or TOML) data into a :class:`Domain`."""
    if isinstance(raw, list):
        return Domain((decode_value(item) for item in raw), Mode.SEQUENCE)
    if isinstance(raw, dict):
        if set(raw) != {COLLECTION_KEY} or not isinstance(raw[COLLECTION_KEY], list):
            msg = f'Collection literals must look like {{"{COLLECTION_KEY}": [...]}}, got {raw!r}'
            raise CodecError(msg)
        return Domain((decode_value(item) for item in raw[COLLECTION_KEY]), Mode.COLLECTION)
    msg = f"Expected a JSON array or collection object, got {type(raw).__name__}"
    raise CodecError(msg)


def parse_domain(text: str) -> Domain:
    """Parse a JSON domain literal from the command line."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON literal {text!r}: {exc.msg}"
        raise CodecError(msg) from exc
    return decode_domain(raw)


def decode_named_domains(raw: Mapping[str, Any]) -> dict[str, Domain]:
    """Decode a ``tag -> literal`` mapping (e.g. a sum-type file)."""
    named: dict[str, Domain] = {}
    for tag, literal in raw.items():
        try:
            named[tag] = decode_domain(literal)
        except CodecError as exc:
            msg = f"Tag {tag!r}: {exc}"
            raise CodecError(msg) from exc
    return named


def encode_value(value: Any) -> Any:
    """Encode one element into JSON-ready data."""
    if isinstance(value, Domain):
        return encode_domain(value)
    if isinstance(value, tuple):
        return [encode_value(item) for item in value]
    if isinstance(value, TaggedValue):
        return {"tag": value.tag, "value": encode_value(value.value)}
    return value


def encode_domain(domain: Domain) -> list[Any] | dict[str, list[Any]]:
    """Encode *domain* using the same wire shape :func:`decode_domain` reads."""
    items = [encode_value(v) for v in domain.elements]
    if domain.mode is Mode.COLLECTION:
        return {COLLECTION_KEY: items}
    return items
