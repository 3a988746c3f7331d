"""Configuration loading and management for Coverage Sunburst.

Configuration sources are merged in priority order:
    1. Defaults (defined in SunburstConfig)
    2. Global config (~/.coverage-sunburst.toml)
    3. Project config (./coverage-sunburst.toml)
    4. Explicit config file
    5. Environment variables (SUNBURST_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(default_version="1.19.0")
    >>> config.default_version
    '1.19.0'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# Releases known to the dashboard before any catalog has been loaded.
KNOWN_RELEASES = [
    "1.19.0",
    "1.18.0",
    "1.17.0",
    "1.16.0",
    "1.15.0",
]


@dataclass(frozen=True)
class SunburstConfig:
    """Settings for the derivation layer and its CLI.

    Attributes:
        releases: Versions that get an empty placeholder release at startup
        default_version: Version selected when no filter names one
        strict_invariants: Raise instead of logging on invariant violations
        verbosity: Logging verbosity level
        log_file: Optional file to append log records to
        level_colours: Overrides for the level colour table
        category_colours: Overrides for the category colour table
    """

    releases: list[str] = field(default_factory=lambda: list(KNOWN_RELEASES))
    default_version: str = ""
    strict_invariants: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None
    level_colours: dict[str, str] = field(default_factory=dict)
    category_colours: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")
        if len(set(self.releases)) != len(self.releases):
            raise InvalidConfigError("releases", self.releases, "duplicate release versions")
        if any(not version for version in self.releases):
            raise InvalidConfigError("releases", self.releases, "empty release version")
        for key in ("level_colours", "category_colours"):
            table = getattr(self, key)
            if not all(isinstance(v, str) for v in table.values()):
                raise InvalidConfigError(key, table, "colours must be strings")


DEFAULT_CONFIG = SunburstConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> SunburstConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated SunburstConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".coverage-sunburst.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "coverage-sunburst.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    # [colours] section: {"levels": {...}, "categories": {...}}
    colours = merged.pop("colours", None)
    if isinstance(colours, dict):
        merged.setdefault("level_colours", dict(colours.get("levels", {})))
        merged.setdefault("category_colours", dict(colours.get("categories", {})))

    try:
        return SunburstConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SUNBURST_* environment variables.

    Supported environment variables:
        SUNBURST_DEFAULT_VERSION: str
        SUNBURST_STRICT_INVARIANTS: bool (true/false/1/0)
        SUNBURST_VERBOSITY: quiet/normal/verbose
        SUNBURST_LOG_FILE: str
        SUNBURST_RELEASES: comma-separated versions

    Returns:
        Dict of field_name -> parsed_value for any SUNBURST_* vars found.
    """
    type_hints = get_type_hints(SunburstConfig)
    result: dict[str, Any] = {}

    for field_name in SunburstConfig.__dataclass_fields__:
        env_key = f"SUNBURST_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single string
    (the colour tables).
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is dict:
        return None

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
