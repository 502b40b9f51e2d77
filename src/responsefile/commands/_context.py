"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and telemetry, builds the
service, and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from responsefile.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from responsefile.config.settings import ResponseFileSettings
    from responsefile.services.response import ResponseFileService
    from responsefile.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ResponseFileSettings) -> None:
        self.settings = settings

        from responsefile.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from responsefile.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> ResponseFileService:
        from responsefile.services.response import ResponseFileService

        return ResponseFileService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Quiet argument lists already end in a newline (or are empty) and
          are written as-is so stdout is a valid response file.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            as_lines = (
                settings.quiet
                and not settings.json_output
                and isinstance(result.data.get("args"), list)
            )
            click.echo(output, nl=not as_lines)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
