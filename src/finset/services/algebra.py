"""AlgebraService — set operations, predicates, and combinatorics.

Operands arrive as JSON literals (see :mod:`finset.services.codec`) or
ready-made domains. Combinatorial results are produced lazily by the
engine and only materialized up to ``engine.max_materialize`` entries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from finset.domain.combinatorics import iter_cartesian_product, power_set, power_set_size
from finset.domain.operations import (
    complement,
    difference,
    intersection,
    symmetric_difference,
    union,
)
from finset.domain.predicates import (
    are_all_disjoint,
    cardinality,
    equal,
    is_disjoint,
    is_empty,
    subset,
)
from finset.domain.types import Domain
from finset.services.base import BaseService
from finset.services.codec import CodecError, encode_domain, encode_value
from finset.services.result import ServiceResult
from finset.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

OPERATIONS: dict[str, Callable[[Domain, Domain], Domain]] = {
    "union": union,
    "intersection": intersection,
    "difference": difference,
    "symmetric-difference": symmetric_difference,
    "complement": complement,
}

BINARY_PREDICATES: dict[str, Callable[[Domain, Domain], bool]] = {
    "subset": subset,
    "equal": equal,
    "disjoint": is_disjoint,
}

UNARY_PREDICATES = ("empty", "cardinality")


def _describe(domain: Domain) -> dict[str, Any]:
    return {
        "result": encode_domain(domain),
        "mode": str(domain.mode),
        "count": len(domain),
    }


class AlgebraService(BaseService):
    """Evaluates engine operations over domain literals."""

    @traced
    def apply(self, operation: str, left: str | Domain, right: str | Domain) -> ServiceResult:
        """Apply a binary set operation (union, intersection, ...)."""
        func = OPERATIONS.get(operation)
        if func is None:
            return ServiceResult.failure(
                operation,
                "UNKNOWN_OPERATION",
                f"Unknown set operation: {operation}",
                choices=sorted(OPERATIONS),
            )
        try:
            a, b = self._domains(left, right)
        except CodecError as exc:
            return ServiceResult.failure(operation, "INVALID_LITERAL", str(exc))

        with trace_span("evaluate") as span:
            result = func(a, b)
            if span:
                span.annotate("operands", [len(a), len(b)])
                span.annotate("result_count", len(result))
        logger.debug("%s: %d x %d -> %d", operation, len(a), len(b), len(result))
        return ServiceResult(ok=True, op=operation, data=_describe(result))

    @traced
    def check(
        self,
        predicate: str,
        left: str | Domain,
        right: str | Domain | None = None,
    ) -> ServiceResult:
        """Evaluate a decision predicate or cardinality."""
        if predicate not in BINARY_PREDICATES and predicate not in UNARY_PREDICATES:
            return ServiceResult.failure(
                "check",
                "UNKNOWN_OPERATION",
                f"Unknown predicate: {predicate}",
                choices=sorted([*BINARY_PREDICATES, *UNARY_PREDICATES]),
            )
        binary = predicate in BINARY_PREDICATES
        if binary and right is None:
            return ServiceResult.failure(
                "check", "MISSING_OPERAND", f"Predicate {predicate} needs two domains"
            )
        if not binary and right is not None:
            return ServiceResult.failure(
                "check", "UNEXPECTED_OPERAND", f"Predicate {predicate} takes one domain"
            )
        try:
            literals = (left, right) if binary else (left,)
            domains = self._domains(*literals)  # type: ignore[arg-type]
        except CodecError as exc:
            return ServiceResult.failure("check", "INVALID_LITERAL", str(exc))

        data: dict[str, Any] = {"predicate": predicate}
        if predicate == "cardinality":
            count = cardinality(domains[0])
            data.update(mode=str(count.mode), exact=count.exact, result=count.exact)
        elif predicate == "empty":
            data["result"] = is_empty(domains[0])
        else:
            data["result"] = BINARY_PREDICATES[predicate](domains[0], domains[1])
        return ServiceResult(ok=True, op="check", data=data)

    @traced
    def all_disjoint(self, literals: Sequence[str | Domain]) -> ServiceResult:
        """Check that every domain is disjoint from every other one."""
        try:
            domains = self._domains(*literals)
        except CodecError as exc:
            return ServiceResult.failure("disjoint", "INVALID_LITERAL", str(exc))
        return ServiceResult(
            ok=True,
            op="disjoint",
            data={"result": are_all_disjoint(domains), "domains": len(domains)},
        )

    @traced
    def product(self, left: str | Domain, right: str | Domain) -> ServiceResult:
        """Materialize A × B, refusing results above ``max_materialize``."""
        try:
            a, b = self._domains(left, right)
        except CodecError as exc:
            return ServiceResult.failure("product", "INVALID_LITERAL", str(exc))

        expected = len(a) * len(b)
        if expected > self.max_materialize:
            return ServiceResult.failure(
                "product",
                "TOO_LARGE",
                f"Product has {expected} pairs; limit is {self.max_materialize}",
                count=expected,
                limit=self.max_materialize,
            )
        with trace_span("materialize"):
            result = Domain(iter_cartesian_product(a, b), a.mode)
        return ServiceResult(ok=True, op="product", data=_describe(result))

    @traced
    def power_set(self, literal: str | Domain) -> ServiceResult:
        """Materialize 𝒫(A), refusing results above ``max_materialize``."""
        try:
            (a,) = self._domains(literal)
        except CodecError as exc:
            return ServiceResult.failure("powerset", "INVALID_LITERAL", str(exc))

        expected = power_set_size(a)
        if expected > self.max_materialize:
            return ServiceResult.failure(
                "powerset",
                "TOO_LARGE",
                f"Power set has {expected} subsets; limit is {self.max_materialize}",
                count=expected,
                limit=self.max_materialize,
            )
        with trace_span("materialize"):
            subsets = [encode_value(s) for s in power_set(a)]
        return ServiceResult(
            ok=True,
            op="powerset",
            data={"result": subsets, "mode": str(a.mode), "count": len(subsets)},
        )
