"""Command: inspect a sum-type definition file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from finset.commands._base import FinsetCommand

if TYPE_CHECKING:
    from finset.commands._context import AppContext


def _split_handlers(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> list[str] | None:
    if value is None:
        return None
    return [tag.strip() for tag in value.split(",") if tag.strip()]


@click.command(
    cls=FinsetCommand,
    examples="""\
  finset sumtype states.toml
  finset sumtype states.toml --handlers idle,loading,success,error
  finset --json sumtype result.json""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--handlers",
    callback=_split_handlers,
    default=None,
    help="Comma-separated tags a matcher would handle; checks exhaustiveness.",
)
@click.pass_obj
def sumtype(app: AppContext, path: Path, handlers: list[str] | None) -> None:
    """Build the disjoint union defined in PATH (TOML or JSON) and report on it."""
    app.emit(app.sumtypes().inspect_file(path, handlers))
