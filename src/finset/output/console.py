"""Theme and console factory for human-readable output.

Renderers draw into an in-memory console and return the text, so
``format_result`` stays a plain ``ServiceResult -> str`` function. Rich
drops color codes by itself when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FINSET_THEME = Theme(
    {
        "finset.ok": "bold green",
        "finset.error": "bold red",
        "finset.warning": "bold yellow",
        "finset.op": "bold cyan",
        "finset.key": "dim",
        "finset.true": "green",
        "finset.false": "red",
        "finset.mode.sequence": "blue",
        "finset.mode.collection": "magenta",
        "finset.tag": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing into a fresh StringIO, themed with FINSET_THEME.

    *width* defaults to 120 columns (the ``[output] width`` default).
    """
    return Console(
        file=StringIO(),
        theme=FINSET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_bool(value: object) -> str:
    if value is True:
        return "finset.true"
    if value is False:
        return "finset.false"
    return ""


def style_for_mode(mode: str) -> str:
    return f"finset.mode.{mode}" if mode in ("sequence", "collection") else ""
