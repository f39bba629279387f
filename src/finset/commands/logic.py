"""Command: boolean connectives."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand
from finset.services.logic import CONNECTIVES

if TYPE_CHECKING:
    from finset.commands._context import AppContext


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset logic implies false true
  finset logic xor true true
  finset logic all true yes 1
  finset -q logic any""",
)
@click.argument("connective", type=click.Choice(CONNECTIVES))
@click.argument("values", nargs=-1)
@click.pass_obj
def logic(app: AppContext, connective: str, values: tuple[str, ...]) -> None:
    """Evaluate CONNECTIVE over boolean VALUES (true/false, yes/no, 1/0).

    ``all`` and ``any`` take any number of values; ``all`` of nothing is
    true and ``any`` of nothing is false.
    """
    app.emit(app.logic().evaluate(connective, list(values)))
