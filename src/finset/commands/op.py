"""Command: binary set operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand
from finset.services.algebra import OPERATIONS

if TYPE_CHECKING:
    from finset.commands._context import AppContext


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset op union '["a","b"]' '["c","d"]'
  finset op intersection '{"collection":[2,4,6]}' '{"collection":[1,2,3]}'
  finset op complement '["a","b","c","d"]' '["a","b"]'
  finset --json op symmetric-difference '["a","b","c"]' '["b","c","d"]'""",
)
@click.argument("operation", type=click.Choice(sorted(OPERATIONS)))
@click.argument("left")
@click.argument("right")
@click.pass_obj
def op(app: AppContext, operation: str, left: str, right: str) -> None:
    """Apply OPERATION to the domains LEFT and RIGHT.

    Domains are JSON literals: an array is a Sequence domain and
    {"collection": [...]} is a Collection domain. The result takes the
    mode of LEFT. For complement, LEFT is the universe.
    """
    app.emit(app.algebra().apply(operation, left, right))
