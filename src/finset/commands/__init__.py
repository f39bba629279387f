"""Subcommand modules for finset.

Provides register_commands() which uses deferred imports to keep
``finset --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from finset.commands.check import check
    from finset.commands.disjoint import disjoint
    from finset.commands.logic import logic
    from finset.commands.op import op
    from finset.commands.powerset import powerset
    from finset.commands.product import product
    from finset.commands.sumtype import sumtype

    cli.add_command(op)
    cli.add_command(check)
    cli.add_command(disjoint)
    cli.add_command(product)
    cli.add_command(powerset)
    cli.add_command(logic)
    cli.add_command(sumtype)
