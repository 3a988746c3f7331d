"""
Coverage Sunburst - reactive views of API endpoint test coverage

Turns a flat catalog of endpoints (level, category, tested flags) and the
user's current selection into the data behind a level -> category ->
endpoint sunburst: the tree, the zoomed subtree, a breadcrumb trail and
coverage counts at the focused depth.
"""

__version__ = "0.1.0"

from .config import SunburstConfig, load_config
from .context import SunburstContext
from .models import (
    BranchNode,
    CoverageSummary,
    Depth,
    Endpoint,
    EndpointDetail,
    Filters,
    LeafNode,
    Release,
)

__all__ = [
    "SunburstContext",  # Main entry point
    "SunburstConfig",
    "load_config",
    "Endpoint",
    "Release",
    "Filters",
    "BranchNode",
    "LeafNode",
    "Depth",
    "CoverageSummary",
    "EndpointDetail",
]
