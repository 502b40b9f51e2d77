"""Command: expand @file arguments."""

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
  responsefile expand @args.rsp
  responsefile --json expand -- -c @flags.rsp main.c
  responsefile -q expand @outer.rsp > flat.rsp""",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def expand(app: AppContext, args: tuple[str, ...]) -> None:
    """Replace every @file in ARGS with the arguments it holds, recursively."""
    app.emit(app.service.expand(args))
