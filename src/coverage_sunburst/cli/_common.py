"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..catalog import load_release
from ..config import SunburstConfig, load_config
from ..context import SunburstContext
from ..logging_config import setup_logging
from ..models import Release

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    strict: bool = False,
) -> SunburstConfig:
    """Build settings from CLI options and set up logging."""
    overrides = {}
    if verbose:
        overrides["verbose"] = True
    if strict:
        overrides["strict_invariants"] = True
    settings = load_config(config_file=config, **overrides)
    setup_logging(settings.verbosity, log_file=settings.log_file)
    return settings


def build_context(
    catalogs: list[Path], settings: SunburstConfig
) -> tuple[SunburstContext, list[Release]]:
    """Create a context and load every catalog file into it."""
    loaded = [load_release(path) for path in catalogs]
    ctx = SunburstContext(settings)
    ctx.load_catalog(loaded)
    return ctx, loaded


def format_percent(part: int, total: int) -> str:
    if total == 0:
        return "-"
    return f"{100.0 * part / total:.1f}%"
