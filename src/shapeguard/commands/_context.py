"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapeguard.output.formatters import format_report

if TYPE_CHECKING:
    from shapeguard.config.settings import ShapeguardSettings
    from shapeguard.services.laws import LawReport


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShapeguardSettings) -> None:
        self.settings = settings

        from shapeguard.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, report: LawReport) -> None:
        """Format and output a LawReport with correct exit semantics.

        * Every law holds: writes to stdout, returns normally.
        * Any failure: writes to stderr, exits with code 1.
        """
        output = format_report(
            report,
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        if report.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
