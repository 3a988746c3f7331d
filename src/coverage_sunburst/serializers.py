"""Derived values -> plain dicts for the rendering layer.

Key conventions follow the frontend: camelCase for counts and detail
fields, ``{}`` for "no data" (no tree, no coverage).
"""

from __future__ import annotations

import dataclasses
from typing import Any, Optional

from .models import (
    CoverageSummary,
    EndpointDetail,
    Filters,
    LeafNode,
    NodeKind,
    Release,
    SunburstNode,
)


def node_to_dict(node: Optional[SunburstNode]) -> dict[str, Any]:
    if node is None:
        return {}
    if isinstance(node, LeafNode):
        return {
            **dataclasses.asdict(node.record),
            "name": node.name,
            "value": node.value,
            "color": node.color,
        }
    result: dict[str, Any] = {"name": node.name, "color": node.color}
    if node.kind is not NodeKind.ROOT:
        result.update(level=node.level, category=node.category, endpoint=node.endpoint)
    result["children"] = [node_to_dict(child) for child in node.children]
    return result


def coverage_to_dict(summary: Optional[CoverageSummary]) -> dict[str, int]:
    if summary is None:
        return {}
    return {
        "totalEndpoints": summary.total_endpoints,
        "testedEndpoints": summary.tested_endpoints,
        "confTestedEndpoints": summary.conf_tested_endpoints,
    }


def detail_to_dict(detail: EndpointDetail) -> dict[str, Any]:
    return {
        "tested": detail.tested,
        "endpoint": detail.endpoint,
        "confTested": detail.conf_tested,
        "description": detail.description,
        "path": detail.path,
        "group": detail.group,
        "version": detail.version,
        "kind": detail.kind,
    }


def filters_to_dict(filters: Filters) -> dict[str, Any]:
    result = dataclasses.asdict(filters)
    result["test_tags"] = list(filters.test_tags)
    return result


def release_summary(release: Optional[Release]) -> dict[str, Any]:
    if release is None:
        return {}
    return {
        "release": release.release,
        "spec": release.spec,
        "source": release.source,
        "release_date": release.release_date.isoformat(),
        "endpoint_count": len(release.endpoints),
    }


def snapshot_to_dict(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Serialize a :meth:`SunburstContext.snapshot` for JSON output."""
    return {
        "filters": filters_to_dict(snapshot["filters"]),
        "release": release_summary(snapshot["active_release"]),
        "sunburst": node_to_dict(snapshot["sunburst"]),
        "zoomedSunburst": node_to_dict(snapshot["zoomed_sunburst"]),
        "breadcrumb": list(snapshot["breadcrumb"]),
        "currentDepth": snapshot["current_depth"].value,
        "coverageAtDepth": coverage_to_dict(snapshot["coverage_at_depth"]),
        "endpointCoverage": detail_to_dict(snapshot["endpoint_coverage"]),
    }
