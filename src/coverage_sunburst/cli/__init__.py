"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__

app = typer.Typer(
    name="coverage-sunburst",
    help="Coverage Sunburst - API endpoint coverage at any drill-down depth",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Inspect endpoint coverage catalogs."""
    if version:
        typer.echo(f"coverage-sunburst {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Import subcommands to register them
from .inspect import inspect as _inspect  # noqa: F401, E402
from .releases import releases as _releases  # noqa: F401, E402


def main() -> None:
    app()
