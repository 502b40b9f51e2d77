"""Command: run a program with its arguments shortened."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from responsefile.commands._base import RfCommand

if TYPE_CHECKING:
    from responsefile.commands._context import AppContext


@click.command(
    "exec",
    cls=RfCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  responsefile exec -- gcc -o app main.o util.o
  responsefile exec --limit -1 -- link.exe /OUT:app.exe a.obj b.obj""",
)
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Argument length limit in bytes (0: default, negative: always).",
)
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def exec_cmd(app: AppContext, limit: int | None, command: str, args: tuple[str, ...]) -> None:
    """Run COMMAND with ARGS, passing them through a response file if too long.

    Exits with the command's own exit code. The response file is removed
    once the command finishes.
    """
    result = app.service.run(command, args, limit=limit)
    if not result.ok or app.settings.json_output or app.settings.verbose:
        app.emit(result)
    raise SystemExit(result.data["returncode"])
