"""Root CLI group for finset with global flags and command registration."""

from __future__ import annotations

import click

from finset import __version__
from finset.commands import register_commands
from finset.commands._base import FinsetGroup
from finset.commands._context import AppContext
from finset.config.settings import FinsetSettings


@click.group(cls=FinsetGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="finset")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and telemetry spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """finset — finite-domain set algebra and sum types."""
    settings = FinsetSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
