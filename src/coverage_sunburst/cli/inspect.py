"""``coverage-sunburst inspect`` — coverage at a chosen drill-down focus."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..context import SunburstContext
from ..exceptions import CoverageSunburstError
from ..serializers import snapshot_to_dict
from . import app
from ._common import build_context, console, format_percent, resolve_config


@app.command()
def inspect(
    catalogs: List[Path] = typer.Argument(
        ..., help="Release catalog JSON files", exists=True, dir_okay=False
    ),
    version: Optional[str] = typer.Option(None, "--version", "-r", help="Release to inspect"),
    level: str = typer.Option("", "--level", "-l", help="Selected level"),
    category: str = typer.Option("", "--category", "-c", help="Selected category"),
    endpoint: str = typer.Option("", "--endpoint", "-e", help="Selected endpoint id"),
    hover: List[str] = typer.Option([], "--hover", help="Hovered node name (repeatable)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Config file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on invariant violations"),
    json_output: bool = typer.Option(False, "--json", help="Output the full JSON snapshot"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """
    Show breadcrumb, depth, coverage and endpoint detail for a focus.

    [bold cyan]Examples:[/bold cyan]

      coverage-sunburst inspect 1.19.json -r 1.19.0 -l stable

      coverage-sunburst inspect 1.19.json -r 1.19.0 -l stable -c core -e readCoreV1Pod --json
    """
    try:
        settings = resolve_config(config=config, verbose=verbose, strict=strict)
        ctx, loaded = build_context(catalogs, settings)
        selected = version or settings.default_version or loaded[0].release
        ctx.update_filters(version=selected, level=level, category=category, endpoint=endpoint)
        ctx.set_hover_path(hover)
    except CoverageSunburstError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if ctx.active_release is None:
        console.print(f"[yellow]No release loaded for version {selected!r}.[/yellow]")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(snapshot_to_dict(ctx.snapshot()), indent=2))
    else:
        _output_rich(ctx)


def _output_rich(ctx: SunburstContext) -> None:
    """Human-readable Rich table output."""
    from rich.table import Table

    crumbs = " › ".join(ctx.breadcrumb) or "root"
    depth = ctx.current_depth.value
    console.print(f"[bold]{ctx.filters.version}[/bold]  {crumbs}  [dim]({depth})[/dim]")

    summary = ctx.coverage_at_depth
    table = Table(title="Coverage", show_lines=False, pad_edge=True)
    table.add_column("Endpoints", justify="right")
    table.add_column("Tested", justify="right")
    table.add_column("Conformance tested", justify="right")
    if summary is not None:
        total = summary.total_endpoints
        table.add_row(
            str(total),
            f"{summary.tested_endpoints} ({format_percent(summary.tested_endpoints, total)})",
            f"{summary.conf_tested_endpoints} "
            f"({format_percent(summary.conf_tested_endpoints, total)})",
        )
    console.print(table)

    detail = ctx.endpoint_coverage
    if not detail.is_empty:
        detail_table = Table(title=detail.endpoint, show_header=False)
        detail_table.add_column("Field", style="cyan")
        detail_table.add_column("Value")
        for label, value in (
            ("path", detail.path),
            ("description", detail.description),
            ("group", detail.group),
            ("version", detail.version),
            ("kind", detail.kind),
            ("tested", str(detail.tested)),
            ("conformance tested", str(detail.conf_tested)),
        ):
            detail_table.add_row(label, value)
        console.print(detail_table)
