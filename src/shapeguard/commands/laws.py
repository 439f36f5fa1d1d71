"""Command: run the engine's behavioural laws as a self-check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapeguard.commands._base import SgCommand

if TYPE_CHECKING:
    from shapeguard.commands._context import AppContext


@click.command(
    cls=SgCommand,
    examples="""\
  shapeguard laws
  shapeguard laws --only agreement --only degenerate
  shapeguard --json laws
  shapeguard -v laws""",
)
@click.option("--only", "only", multiple=True, help="Run only the named law (repeatable).")
@click.pass_obj
def laws(app: AppContext, only: tuple[str, ...]) -> None:
    """Check that schemas behave as documented on this interpreter."""
    from shapeguard.services.laws import DEFAULT_LAWS, run_laws, select_laws

    selected = DEFAULT_LAWS
    if only:
        try:
            selected = select_laws(only)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--only") from exc

    app.emit(run_laws(selected))
