"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. Owns logging setup and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xkpass.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from xkpass.config.settings import XkSettings
    from xkpass.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: XkSettings) -> None:
        self.settings = settings

        from xkpass.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped passwords.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
