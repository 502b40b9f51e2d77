"""Command: write a long argument list to a response file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from responsefile.commands._base import RfCommand

if TYPE_CHECKING:
    from responsefile.commands._context import AppContext


@click.command(
    cls=RfCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  responsefile shorten -- -o out.exe a.obj b.obj
  responsefile shorten --limit -1 -- foo bar baz
  responsefile -q shorten --limit 8000 -- $(cat objects.txt)""",
)
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Argument length limit in bytes (0: default, negative: always).",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def shorten(app: AppContext, limit: int | None, args: tuple[str, ...]) -> None:
    """Replace ARGS with a single @file argument if they are too long.

    The response file is left in place; remove it once it has been used.
    """
    app.emit(app.service.shorten(args, limit=limit))
