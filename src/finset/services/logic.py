"""LogicService — evaluate boolean connectives over CLI-supplied values."""

from __future__ import annotations

from collections.abc import Sequence

from finset.domain.logic import BINARY_CONNECTIVES, all_true, any_true, not_
from finset.services.base import BaseService
from finset.services.result import ServiceResult
from finset.services.telemetry import traced

_TRUE = frozenset({"true", "t", "yes", "y", "1"})
_FALSE = frozenset({"false", "f", "no", "n", "0"})

CONNECTIVES = (*BINARY_CONNECTIVES, "not", "all", "any")


def parse_bool(raw: str) -> bool:
    """Parse a boolean word.

    Raises:
        ValueError: If *raw* is not a recognized boolean spelling.
    """
    word = raw.strip().lower()
    if word in _TRUE:
        return True
    if word in _FALSE:
        return False
    msg = f"Not a boolean: {raw!r}"
    raise ValueError(msg)


class LogicService(BaseService):
    """Evaluates And/Or/Not/... and the n-ary AllTrue/AnyTrue."""

    @traced
    def evaluate(self, connective: str, raw_values: Sequence[str]) -> ServiceResult:
        if connective not in CONNECTIVES:
            return ServiceResult.failure(
                "logic",
                "UNKNOWN_OPERATION",
                f"Unknown connective: {connective}",
                choices=list(CONNECTIVES),
            )
        try:
            values = [parse_bool(v) for v in raw_values]
        except ValueError as exc:
            return ServiceResult.failure("logic", "INVALID_BOOLEAN", str(exc))

        if connective == "all":
            result = all_true(values)
        elif connective == "any":
            result = any_true(values)
        else:
            arity = 1 if connective == "not" else 2
            if len(values) != arity:
                return ServiceResult.failure(
                    "logic",
                    "ARITY",
                    f"{connective} takes {arity} value(s), got {len(values)}",
                )
            result = not_(values[0]) if arity == 1 else BINARY_CONNECTIVES[connective](*values)

        return ServiceResult(
            ok=True,
            op="logic",
            data={"connective": connective, "values": values, "result": result},
        )
