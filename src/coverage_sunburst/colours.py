"""Colour lookup tables for sunburst nodes.

Lookups never fail: unknown levels get the ``unused`` colour and unknown
categories get ``CATEGORY_FALLBACK``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from .models import Endpoint

ROOT_COLOUR = "white"
CATEGORY_FALLBACK = "rgba(183, 28, 28, 1)"

LEVEL_COLOURS: dict[str, str] = {
    "stable": "rgba(14, 77, 146, 1)",
    "beta": "rgba(61, 131, 187, 1)",
    "alpha": "rgba(126, 178, 221, 1)",
    "unused": "rgba(255, 255, 255, 1)",
}

CATEGORY_COLOURS: dict[str, str] = {
    "core": "rgba(0, 77, 64, 1)",
    "apps": "rgba(0, 105, 92, 1)",
    "batch": "rgba(0, 137, 123, 1)",
    "networking": "rgba(38, 166, 154, 1)",
    "storage": "rgba(77, 182, 172, 1)",
    "rbacAuthorization": "rgba(128, 203, 196, 1)",
    "authentication": "rgba(178, 223, 219, 1)",
    "policy": "rgba(106, 27, 154, 1)",
    "autoscaling": "rgba(142, 36, 170, 1)",
    "apiextensions": "rgba(171, 71, 188, 1)",
}

ENDPOINT_CONF_TESTED = "rgba(0, 150, 136, 1)"
ENDPOINT_TESTED = "rgba(255, 193, 7, 1)"
ENDPOINT_UNTESTED = "rgba(244, 67, 54, 1)"


@dataclass(frozen=True)
class ColourScheme:
    """Level, category and endpoint colours with fixed fallbacks."""

    levels: Mapping[str, str] = field(default_factory=lambda: dict(LEVEL_COLOURS))
    categories: Mapping[str, str] = field(default_factory=lambda: dict(CATEGORY_COLOURS))
    root: str = ROOT_COLOUR
    category_fallback: str = CATEGORY_FALLBACK

    @classmethod
    def with_overrides(
        cls,
        levels: Optional[Mapping[str, str]] = None,
        categories: Optional[Mapping[str, str]] = None,
    ) -> "ColourScheme":
        return cls(
            levels={**LEVEL_COLOURS, **(levels or {})},
            categories={**CATEGORY_COLOURS, **(categories or {})},
        )

    def level_colour(self, level: str) -> str:
        colour = self.levels.get(level)
        if colour:
            return colour
        return self.levels.get("unused") or LEVEL_COLOURS["unused"]

    def category_colour(self, category: str) -> str:
        return self.categories.get(category) or self.category_fallback

    def endpoint_colour(self, endpoint: Endpoint) -> str:
        if endpoint.conf_tested:
            return ENDPOINT_CONF_TESTED
        if endpoint.tested:
            return ENDPOINT_TESTED
        return ENDPOINT_UNTESTED


DEFAULT_COLOURS = ColourScheme()
