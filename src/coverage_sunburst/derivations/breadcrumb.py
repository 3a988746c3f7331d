"""Breadcrumb trail and depth classification.

The trail merges the selected drill-down path with the names under the
pointer, e.g. filters ``(stable, core, "")`` hovering ``[stable, core,
GET /pods]`` gives ``("stable", "core", "GET /pods")``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..exceptions import InvariantViolationError
from ..models import Breadcrumb, Depth, Filters, HoverPath

logger = logging.getLogger(__name__)

MAX_CRUMBS = 3

DEPTHS = (Depth.ROOT, Depth.LEVEL, Depth.CATEGORY, Depth.ENDPOINT)


def hover_names(hover_path: HoverPath) -> list[str]:
    """Extract node names from ``{"data": {"name": ...}}`` hover payloads.

    Plain strings are taken as names as they are.
    """
    names = []
    for node in hover_path:
        if isinstance(node, str):
            names.append(node)
        else:
            data: Any = node.get("data") or {}
            names.append(data.get("name", "") if isinstance(data, Mapping) else "")
    return names


def _compact_unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def build_breadcrumb(filters: Filters, hover_path: HoverPath) -> Breadcrumb:
    """Merge the filter path and hover path into at most three crumbs.

    When exactly four distinct names remain, the user is zoomed into one
    endpoint while hovering another; the hovered one wins and the selected
    endpoint is dropped.
    """
    crumbs = _compact_unique(
        [filters.level, filters.category, filters.endpoint, *hover_names(hover_path)]
    )
    if len(crumbs) == MAX_CRUMBS + 1:
        crumbs = [crumb for crumb in crumbs if crumb != filters.endpoint]
    return tuple(crumbs[:MAX_CRUMBS])


def classify_depth(breadcrumb: Breadcrumb, strict: bool = False) -> Depth:
    """Map breadcrumb length 0-3 to root/level/category/endpoint.

    Raises:
        InvariantViolationError: In strict mode, for more than three crumbs
    """
    if len(breadcrumb) < len(DEPTHS):
        return DEPTHS[len(breadcrumb)]

    if len(breadcrumb) > MAX_CRUMBS:
        message = f"Breadcrumb has {len(breadcrumb)} crumbs, expected at most {MAX_CRUMBS}"
        if strict:
            raise InvariantViolationError(message, node="current_depth")
        logger.warning("%s: %r", message, breadcrumb)
    return Depth.ENDPOINT
