"""``coverage-sunburst releases`` — list loaded releases and their totals."""

from pathlib import Path
from typing import List, Optional

import typer

from ..derivations import coverage_at_depth
from ..exceptions import CoverageSunburstError
from . import app
from ._common import build_context, console, format_percent, resolve_config


@app.command()
def releases(
    catalogs: List[Path] = typer.Argument(
        ..., help="Release catalog JSON files", exists=True, dir_okay=False
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """List every known release with its overall coverage."""
    from rich.table import Table

    try:
        settings = resolve_config(config=config, verbose=verbose)
        ctx, _ = build_context(catalogs, settings)
    except CoverageSunburstError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Releases", show_lines=False, pad_edge=True)
    table.add_column("Release")
    table.add_column("Date")
    table.add_column("Endpoints", justify="right")
    table.add_column("Tested", justify="right")
    table.add_column("Conformance tested", justify="right")

    for version, release in ctx.releases.items():
        summary = coverage_at_depth((), release.endpoints)
        if summary is None:
            table.add_row(version, "-", "0", "-", "-")
            continue
        total = summary.total_endpoints
        table.add_row(
            version,
            release.release_date.isoformat(),
            str(total),
            format_percent(summary.tested_endpoints, total),
            format_percent(summary.conf_tested_endpoints, total),
        )
    console.print(table)
