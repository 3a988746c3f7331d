"""Grouping endpoints and building the sunburst tree.

The tree has four fixed depths::

    root
    └── level        (descending by name)
        └── category (first-occurrence order)
            └── endpoint leaf (worst coverage first)
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..colours import DEFAULT_COLOURS, ColourScheme
from ..models import BranchNode, Endpoint, GroupedEndpoints, LeafNode, NodeKind


def group_endpoints(
    endpoints: Sequence[Endpoint], colours: ColourScheme = DEFAULT_COLOURS
) -> GroupedEndpoints:
    """Group endpoints by level, then category, as coloured leaves.

    Groups keep the order in which their first endpoint appears.
    """
    grouped: GroupedEndpoints = {}
    for endpoint in endpoints:
        leaf = LeafNode.from_endpoint(endpoint, colours.endpoint_colour(endpoint))
        grouped.setdefault(endpoint.level, {}).setdefault(endpoint.category, []).append(leaf)
    return grouped


def sort_leaves(leaves: Sequence[LeafNode]) -> tuple[LeafNode, ...]:
    """Order leaves by (tested, conf_tested), untested first.

    ``sorted`` is stable, so equal keys keep their catalog order.
    """
    return tuple(sorted(leaves, key=lambda leaf: (leaf.tested, leaf.conf_tested)))


def build_sunburst(
    grouped: GroupedEndpoints, colours: ColourScheme = DEFAULT_COLOURS
) -> Optional[BranchNode]:
    """Build the root node from grouped endpoints; None when there are none."""
    if not grouped:
        return None

    levels = []
    for level, by_category in grouped.items():
        categories = tuple(
            BranchNode(
                kind=NodeKind.CATEGORY,
                name=category,
                color=colours.category_colour(category),
                level=level,
                category=category,
                children=sort_leaves(leaves),
            )
            for category, leaves in by_category.items()
        )
        levels.append(
            BranchNode(
                kind=NodeKind.LEVEL,
                name=level,
                color=colours.level_colour(level),
                level=level,
                children=categories,
            )
        )

    levels.sort(key=lambda node: node.name, reverse=True)
    return BranchNode(
        kind=NodeKind.ROOT,
        name="root",
        color=colours.root,
        children=tuple(levels),
    )
