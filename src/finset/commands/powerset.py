"""Command: power set."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand

if TYPE_CHECKING:
    from finset.commands._context import AppContext


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset powerset '["a","b","c"]'
  FINSET_ENGINE__MAX_MATERIALIZE=65536 finset powerset '[1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16]'""",
)
@click.argument("domain")
@click.pass_obj
def powerset(app: AppContext, domain: str) -> None:
    """List every sub-domain of DOMAIN, from the empty domain up.

    Refuses to materialize more than ``engine.max_materialize`` subsets.
    """
    app.emit(app.algebra().power_set(domain))
