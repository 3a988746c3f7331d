"""Logging setup for the coverage-sunburst CLI.

Library code only creates loggers under the ``coverage_sunburst`` namespace;
handlers are installed by :func:`setup_logging`, which the CLI calls once
with the resolved ``SunburstConfig.verbosity``.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "coverage_sunburst"

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route package logs to stderr through rich, and optionally to a file.

    Args:
        verbosity: One of ``quiet``, ``normal``, ``verbose``
        log_file: Append plain-text records to this path as well

    Returns:
        The ``coverage_sunburst`` logger
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # endpoint names and paths contain brackets
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, nested under the package logger if it is not already."""
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
