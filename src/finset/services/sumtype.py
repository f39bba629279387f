"""SumTypeService — build and validate disjoint unions from definitions.

A definition maps tag names to domain literals, either in a TOML file::

    idle = []
    loading = ["request_id"]
    success = ["data"]
    error = ["error_code"]

or in an equivalent JSON object. Inspection reports the realized
variants, uninhabited tags, pairwise disjointness and, when handler
names are supplied, whether a matcher over them would be exhaustive.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from finset.domain.tagged import (
    DisjointUnion,
    NonExhaustiveMatchError,
    PatternMatcher,
    UnknownTagError,
    are_pairwise_disjoint,
    overlapping_pairs,
)
from finset.domain.types import Domain
from finset.services.base import BaseService
from finset.services.codec import CodecError, decode_named_domains, encode_value
from finset.services.result import ServiceResult
from finset.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def read_definition(path: Path) -> dict[str, Any]:
    """Load a raw ``tag -> literal`` mapping from a TOML or JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not valid TOML/JSON or not a table.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".toml":
        data: Any = tomllib.loads(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        msg = f"{path} must contain a table of tag -> domain"
        raise ValueError(msg)
    return data


class SumTypeService(BaseService):
    """Inspects sum-type definitions."""

    @traced
    def inspect_file(self, path: Path, handlers: Sequence[str] | None = None) -> ServiceResult:
        """Read a definition file and :meth:`inspect` it."""
        try:
            raw = read_definition(path)
        except (OSError, ValueError) as exc:
            return ServiceResult.failure(
                "sumtype", "INVALID_FILE", f"Cannot load {path}: {exc}", path=str(path)
            )
        try:
            domains = decode_named_domains(raw)
        except CodecError as exc:
            return ServiceResult.failure("sumtype", "INVALID_LITERAL", str(exc), path=str(path))
        return self.inspect(domains, handlers, name=path.stem)

    @traced
    def inspect(
        self,
        domains: Mapping[str, Domain],
        handlers: Sequence[str] | None = None,
        *,
        name: str | None = None,
    ) -> ServiceResult:
        """Build the disjoint union and report on its shape."""
        try:
            union = DisjointUnion(domains, name=name)
        except (TypeError, ValueError) as exc:
            return ServiceResult.failure("sumtype", "INVALID_FILE", str(exc))

        warnings: list[str] = []
        with trace_span("disjointness") as span:
            overlaps = overlapping_pairs(union)
            if span:
                span.annotate("overlaps", len(overlaps))
        if overlaps:
            pairs = ", ".join(f"{a}/{b}" for a, b in overlaps)
            if self._settings.sumtype.require_disjoint:
                return ServiceResult.failure(
                    "sumtype",
                    "OVERLAPPING_DOMAINS",
                    f"Tag domains overlap: {pairs}",
                    overlaps=[list(p) for p in overlaps],
                )
            warnings.append(f"Tag domains overlap: {pairs}")

        variants = list(union.variants())
        data: dict[str, Any] = {
            "name": union.name,
            "tags": list(union.tags),
            "variant_count": len(variants),
            "variants": [encode_value(v) for v in variants[: self.max_materialize]],
            "uninhabited": list(union.uninhabited_tags()),
            "pairwise_disjoint": are_pairwise_disjoint(union),
            "overlaps": [list(p) for p in overlaps],
        }
        if len(variants) > self.max_materialize:
            warnings.append(
                f"Showing {self.max_materialize} of {len(variants)} variants"
            )

        if handlers is not None:
            try:
                matcher = PatternMatcher(union, {tag: _echo for tag in handlers})
            except NonExhaustiveMatchError as exc:
                return ServiceResult.failure(
                    "sumtype",
                    "NON_EXHAUSTIVE",
                    str(exc),
                    missing=list(exc.missing),
                )
            except UnknownTagError as exc:
                return ServiceResult.failure(
                    "sumtype",
                    "UNKNOWN_TAG",
                    str(exc),
                    unknown=list(exc.tags),
                )
            data["exhaustive"] = True
            data["matched"] = len(matcher.match_all())

        logger.debug("sumtype %s: %d tags, %d variants", name, len(union), len(variants))
        return ServiceResult(ok=True, op="sumtype", data=data, warnings=warnings)


def _echo(value: Any) -> Any:
    return value
