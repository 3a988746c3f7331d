"""Parse already-fetched release JSON into Release/Endpoint records.

Expected shape (extra keys are ignored)::

    {
        "release": "1.19.0",
        "spec": "...",
        "source": "...",
        "release_date": "2020-08-26",
        "endpoints": [
            {"endpoint": "readCoreV1Pod", "level": "stable", "category": "core",
             "tested": true, "conf_tested": false, ...}
        ],
        "tests": []
    }
"""

from __future__ import annotations

import json
from dataclasses import fields
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from .exceptions import CatalogError
from .logging_config import get_logger
from .models import Endpoint, Release

logger = get_logger(__name__)

REQUIRED_ENDPOINT_KEYS = ("endpoint", "level", "category")
FLAG_KEYS = ("tested", "conf_tested")
_TRUE_STRINGS = ("true", "1", "yes")
_FALSE_STRINGS = ("false", "0", "no", "")
_ENDPOINT_FIELDS = {f.name for f in fields(Endpoint)}


def _parse_flag(endpoint: Any, key: str, value: Any, source: Optional[Path]) -> bool:
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise CatalogError(f"endpoint {endpoint!r} has non-boolean {key} {value!r}", source)


def endpoint_from_dict(data: Mapping[str, Any], source: Optional[Path] = None) -> Endpoint:
    if not isinstance(data, Mapping):
        raise CatalogError(f"endpoint entry {data!r} must be a JSON object", source)
    missing = [key for key in REQUIRED_ENDPOINT_KEYS if not data.get(key)]
    if missing:
        raise CatalogError(
            f"endpoint {data.get('endpoint', '?')!r} is missing {', '.join(missing)}", source
        )
    values = {k: v for k, v in data.items() if k in _ENDPOINT_FIELDS}
    for flag in FLAG_KEYS:
        values[flag] = _parse_flag(data["endpoint"], flag, values.get(flag), source)
    for key in _ENDPOINT_FIELDS - set(FLAG_KEYS):
        if values.get(key) is None:
            values[key] = ""
    return Endpoint(**values)


def _parse_date(value: Any, source: Optional[Path]) -> date:
    if value in (None, ""):
        return date.today()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        raise CatalogError(f"release_date {value!r} is not an ISO date", source)


def release_from_dict(data: Mapping[str, Any], source: Optional[Path] = None) -> Release:
    """Build a Release from a decoded JSON object.

    Raises:
        CatalogError: If the release key or an endpoint's level/category is missing
    """
    if not isinstance(data, Mapping):
        raise CatalogError("release must be a JSON object", source)
    if not data.get("release"):
        raise CatalogError("release version is missing", source)

    endpoints = tuple(endpoint_from_dict(ep, source) for ep in data.get("endpoints") or [])
    return Release(
        release=str(data["release"]),
        spec=str(data.get("spec") or ""),
        source=str(data.get("source") or ""),
        release_date=_parse_date(data.get("release_date"), source),
        endpoints=endpoints,
        tests=tuple(data.get("tests") or ()),
    )


def load_release(path: Path) -> Release:
    """Read one release JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"cannot read file: {e}", path)
    except json.JSONDecodeError as e:
        raise CatalogError(f"not valid JSON: {e}", path)

    release = release_from_dict(data, path)
    logger.debug("Read %s: release %s, %d endpoints", path, release.release, len(release.endpoints))
    return release
