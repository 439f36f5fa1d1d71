"""Root CLI group for shapeguard with global flags and command registration."""

from __future__ import annotations

import click

from shapeguard import __version__
from shapeguard.commands import register_commands
from shapeguard.commands._context import AppContext
from shapeguard.config.settings import ShapeguardSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="shapeguard")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """shapeguard — runtime schema checks for untyped values."""
    settings = ShapeguardSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
