"""AppContext: the object every command receives via ``@click.pass_obj``.

It owns the resolved settings, hands out services, and turns a
ServiceResult into output plus an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finset.config.logging import configure_logging
from finset.output.formatters import OutputSettings, format_result
from finset.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from finset.config.settings import FinsetSettings
    from finset.services.algebra import AlgebraService
    from finset.services.logic import LogicService
    from finset.services.result import ServiceResult
    from finset.services.sumtype import SumTypeService


class AppContext:
    """Built once per invocation by the root group."""

    def __init__(self, settings: FinsetSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    # Services are imported lazily so ``finset --help`` stays cheap.

    def algebra(self) -> AlgebraService:
        from finset.services.algebra import AlgebraService

        return AlgebraService(self.settings)

    def logic(self) -> LogicService:
        from finset.services.logic import LogicService

        return LogicService(self.settings)

    def sumtypes(self) -> SumTypeService:
        from finset.services.sumtype import SumTypeService

        return SumTypeService(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout so it can be piped; warnings and
        failures go to stderr. JSON output already carries the warnings.
        """
        output = self.output_settings
        text = format_result(result, settings=output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
