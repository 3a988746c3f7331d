"""Exception hierarchy for Coverage Sunburst."""

from .base import CoverageSunburstError
from .catalog import CatalogError
from .config import ConfigurationError, InvalidConfigError
from .derivation import (
    DerivationError,
    InvariantViolationError,
    UnknownNodeError,
)

__all__ = [
    "CoverageSunburstError",
    "CatalogError",
    "ConfigurationError",
    "InvalidConfigError",
    "DerivationError",
    "UnknownNodeError",
    "InvariantViolationError",
]
