"""Command: Cartesian product."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand

if TYPE_CHECKING:
    from finset.commands._context import AppContext


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset product '["a","b"]' '[1,2]'
  finset --json product '{"collection":["x"]}' '[true,false]'""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def product(app: AppContext, left: str, right: str) -> None:
    """Compute LEFT × RIGHT; RIGHT varies fastest."""
    app.emit(app.algebra().product(left, right))
