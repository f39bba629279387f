"""Click classes that add an ``--examples`` flag.

``--help`` stays short; ``finset <command> --examples`` prints a few
copy-pasteable invocations and exits.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Registers an eager ``--examples`` option when *examples* is given."""

    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(  # type: ignore[attr-defined]
            click.Option(
                ["--examples"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class FinsetCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class FinsetGroup(_ExamplesMixin, click.Group):
    """Root group; subcommands default to :class:`FinsetCommand`."""

    command_class = FinsetCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
