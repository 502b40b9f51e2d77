"""Subcommand modules for responsefile.

Provides register_commands() which uses deferred imports to keep
``responsefile --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from responsefile.commands.exec_cmd import exec_cmd
    from responsefile.commands.expand import expand
    from responsefile.commands.shorten import shorten

    cli.add_command(shorten)
    cli.add_command(expand)
    cli.add_command(exec_cmd)
