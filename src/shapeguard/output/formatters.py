"""Rich/JSON rendering of a LawReport.

Humans get a table with one row per law; machines (``--json``) get the
pydantic dump of the report, computed fields included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from shapeguard.output.console import create_console, get_output

if TYPE_CHECKING:
    from shapeguard.services.laws import LawReport


def format_report(report: LawReport, *, json_output: bool = False, verbose: bool = False) -> str:
    """Format a LawReport for display.

    Args:
        report: The report to format.
        json_output: If True, return JSON; otherwise a rendered table.
        verbose: Add a timing column to the human table.
    """
    if json_output:
        return report.model_dump_json(indent=2)

    console = create_console()
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Law", style="sg.name", no_wrap=True)
    table.add_column("Result")
    table.add_column("Description")
    if verbose:
        table.add_column("ms", style="sg.timing", justify="right")

    for check in report.checks:
        result = Text("PASS", style="sg.pass") if check.passed else Text("FAIL", style="sg.fail")
        description = check.description
        if check.detail:
            description = f"{description} ({check.detail})"
        row: list[str | Text] = [check.name, result, description]
        if verbose:
            row.append(f"{check.duration_ms:.2f}")
        table.add_row(*row)

    console.print(table)
    if report.ok:
        console.print(Text(f"OK: {report.total} laws hold", style="sg.pass"))
    else:
        console.print(
            Text(f"FAILED: {len(report.failed)} of {report.total} laws", style="sg.fail")
        )
    return get_output(console).rstrip("\n")
