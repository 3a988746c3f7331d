"""Pure transformations from catalog and filters to dashboard views."""

from .breadcrumb import build_breadcrumb, classify_depth, hover_names
from .coverage import coverage_at_depth, endpoint_detail
from .release import project_endpoints, select_active_release
from .tree import build_sunburst, group_endpoints, sort_leaves
from .zoom import zoom_sunburst

__all__ = [
    "select_active_release",
    "project_endpoints",
    "group_endpoints",
    "sort_leaves",
    "build_sunburst",
    "zoom_sunburst",
    "hover_names",
    "build_breadcrumb",
    "classify_depth",
    "coverage_at_depth",
    "endpoint_detail",
]
