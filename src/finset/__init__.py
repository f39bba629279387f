"""finset — finite-domain set algebra and sum-type construction."""

from __future__ import annotations

from finset.domain.combinatorics import (
    cartesian_product,
    iter_cartesian_product,
    power_set,
    power_set_size,
)
from finset.domain.logic import (
    all_true,
    and_,
    any_true,
    if_,
    iff,
    implies,
    is_false,
    is_true,
    nand,
    nor,
    not_,
    or_,
    xor,
)
from finset.domain.operations import (
    complement,
    difference,
    intersection,
    symmetric_difference,
    union,
    union_all,
)
from finset.domain.predicates import (
    Count,
    are_all_disjoint,
    cardinality,
    equal,
    equale,
    is_disjoint,
    is_disjoint_union,
    is_empty,
    size,
    subset,
)
from finset.domain.tagged import (
    NOTHING,
    DisjointUnion,
    MatchResultTypeError,
    NonExhaustiveMatchError,
    PatternMatcher,
    SumTypeError,
    TaggedValue,
    UnknownTagError,
    are_pairwise_disjoint,
    disjoint_union,
    err,
    extract_tag,
    extract_value,
    filter_by_tag,
    ok,
    option_union,
    result_union,
    some,
    state_machine,
)
from finset.domain.types import (
    EMPTY_SET,
    Domain,
    Mode,
    as_domain,
    collection,
    elements_of,
    empty_set,
    mode_of,
    sequence,
    singleton,
)

__version__ = "0.1.0"

__all__ = [
    "EMPTY_SET",
    "NOTHING",
    "Count",
    "DisjointUnion",
    "Domain",
    "MatchResultTypeError",
    "Mode",
    "NonExhaustiveMatchError",
    "PatternMatcher",
    "SumTypeError",
    "TaggedValue",
    "UnknownTagError",
    "__version__",
    "all_true",
    "and_",
    "any_true",
    "are_all_disjoint",
    "are_pairwise_disjoint",
    "as_domain",
    "cardinality",
    "cartesian_product",
    "collection",
    "complement",
    "difference",
    "disjoint_union",
    "elements_of",
    "empty_set",
    "equal",
    "equale",
    "err",
    "extract_tag",
    "extract_value",
    "filter_by_tag",
    "if_",
    "iff",
    "implies",
    "intersection",
    "is_disjoint",
    "is_disjoint_union",
    "is_empty",
    "is_false",
    "is_true",
    "iter_cartesian_product",
    "mode_of",
    "nand",
    "nor",
    "not_",
    "ok",
    "option_union",
    "or_",
    "power_set",
    "power_set_size",
    "result_union",
    "sequence",
    "singleton",
    "size",
    "some",
    "state_machine",
    "subset",
    "symmetric_difference",
    "union",
    "union_all",
    "xor",
]
