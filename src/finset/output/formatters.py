"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich), for scripts
(``--quiet``: the bare result value), or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from finset.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from finset.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
