"""Narrowing the sunburst to the selected level or category.

A name that does not match any child degrades to the enclosing scope
(root for an unknown level, the level for an unknown category) so the
view stays renderable.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..models import BranchNode, Filters

logger = logging.getLogger(__name__)


def zoom_sunburst(sunburst: Optional[BranchNode], filters: Filters) -> Optional[BranchNode]:
    if sunburst is None or not filters.level:
        return sunburst

    level_node = sunburst.child(filters.level)
    if not isinstance(level_node, BranchNode):
        logger.debug("Zoom level %r not in tree, showing root", filters.level)
        return sunburst

    if not filters.category:
        return level_node

    category_node = level_node.child(filters.category)
    if not isinstance(category_node, BranchNode):
        logger.debug(
            "Zoom category %r not under level %r, showing level",
            filters.category,
            filters.level,
        )
        return level_node
    return category_node
