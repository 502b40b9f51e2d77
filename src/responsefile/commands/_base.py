"""Click command class shared by the responsefile subcommands."""

from __future__ import annotations

import textwrap
from typing import Any

import click


class RfCommand(click.Command):
    """Command that can print a block of usage examples.

    Pass ``examples=`` to ``@click.command(cls=RfCommand, ...)``. The command
    then grows an eager ``--examples`` flag that prints the block and exits
    before any argument parsing errors can occur.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        self._examples_flag = click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._print_examples,
            help="Show usage examples and exit.",
        )

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if self.examples is None:
            return params
        return [*params, self._examples_flag]

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in (self.examples or "").splitlines():
            click.echo(f"  {line}" if line else "")
        ctx.exit(0)
