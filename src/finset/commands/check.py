"""Command: decision predicates and cardinality."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand
from finset.services.algebra import BINARY_PREDICATES, UNARY_PREDICATES

if TYPE_CHECKING:
    from finset.commands._context import AppContext


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset check subset '["a","b"]' '["a","b","c","d"]'
  finset check equal '["a","b"]' '{"collection":["b","a"]}'
  finset check disjoint '[1,2,3]' '["a","b","c"]'
  finset check empty '[]'
  finset -q check cardinality '["a","a","b"]'""",
)
@click.argument("predicate", type=click.Choice(sorted([*BINARY_PREDICATES, *UNARY_PREDICATES])))
@click.argument("left")
@click.argument("right", required=False)
@click.pass_obj
def check(app: AppContext, predicate: str, left: str, right: str | None) -> None:
    """Evaluate PREDICATE over LEFT (and RIGHT for binary predicates).

    Cardinality is exact for Sequence domains and reported as unknown
    (null) for Collection domains.
    """
    app.emit(app.algebra().check(predicate, left, right))
