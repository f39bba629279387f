"""Command: n-ary disjointness."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand

if TYPE_CHECKING:
    from finset.commands._context import AppContext


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset disjoint '[1,2]' '["a","b"]' '[true,false]'
  finset disjoint '[1,2]' '[2,3]' '[4,5]'""",
)
@click.argument("domains", nargs=-1)
@click.pass_obj
def disjoint(app: AppContext, domains: tuple[str, ...]) -> None:
    """Check that all DOMAINS are pairwise disjoint.

    Zero or one domain is trivially disjoint.
    """
    app.emit(app.algebra().all_disjoint(list(domains)))
