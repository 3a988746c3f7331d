"""SunburstContext: the catalog, filters, hover path and every view derived from them.

One context replaces a set of global stores. Pass it to whichever layer
loads catalogs, parses the URL or renders the chart.

Usage:
    ctx = SunburstContext()
    ctx.load_release(release)
    ctx.update_filters(version="1.19.0", level="stable")
    ctx.zoomed_sunburst      # the "stable" level node
    ctx.coverage_at_depth    # counts for the stable endpoints
    unsubscribe = ctx.subscribe("breadcrumb", on_breadcrumb)
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Mapping, Optional

from .colours import ColourScheme
from .config import SunburstConfig
from .derivations import (
    build_breadcrumb,
    build_sunburst,
    classify_depth,
    coverage_at_depth,
    endpoint_detail,
    group_endpoints,
    project_endpoints,
    select_active_release,
    zoom_sunburst,
)
from .logging_config import get_logger
from .models import (
    BranchNode,
    Breadcrumb,
    CoverageSummary,
    Depth,
    Endpoint,
    EndpointDetail,
    Filters,
    GroupedEndpoints,
    HoverPath,
    Release,
)
from .reactive import DerivationGraph

logger = get_logger(__name__)


class SunburstContext:
    """Owns the derivation graph for one dashboard.

    Attributes:
        config:  Settings the context was built with.
        colours: Colour tables used by the tree builder.
        graph:   The underlying DerivationGraph.
    """

    def __init__(self, config: Optional[SunburstConfig] = None) -> None:
        self.config = config or SunburstConfig()
        self.colours = ColourScheme.with_overrides(
            levels=self.config.level_colours,
            categories=self.config.category_colours,
        )
        self.graph = DerivationGraph()
        self._wire()

    def _wire(self) -> None:
        g = self.graph
        colours = self.colours
        strict = self.config.strict_invariants

        placeholders = {version: Release.placeholder() for version in self.config.releases}
        g.add_source("releases", placeholders)
        g.add_source("filters", Filters(version=self.config.default_version))
        g.add_source("hover_path", ())

        g.add_derived("active_release", select_active_release, ("releases", "filters"))
        g.add_derived("endpoints", project_endpoints, ("active_release",))
        g.add_derived(
            "grouped_endpoints",
            lambda eps: group_endpoints(eps, colours),
            ("endpoints",),
        )
        g.add_derived(
            "sunburst",
            lambda grouped: build_sunburst(grouped, colours),
            ("grouped_endpoints",),
        )
        g.add_derived("zoomed_sunburst", zoom_sunburst, ("sunburst", "filters"))
        g.add_derived("breadcrumb", build_breadcrumb, ("filters", "hover_path"))
        g.add_derived(
            "current_depth",
            lambda bc: classify_depth(bc, strict=strict),
            ("breadcrumb",),
        )
        g.add_derived("coverage_at_depth", coverage_at_depth, ("breadcrumb", "endpoints"))
        g.add_derived(
            "endpoint_coverage",
            endpoint_detail,
            ("breadcrumb", "current_depth", "endpoints"),
        )
        logger.debug("Derivation order: %s", " -> ".join(g.order))

    # -----------------------------------------------------------------
    # Inbound: catalog, filters, hover
    # -----------------------------------------------------------------

    def load_release(self, release: Release) -> None:
        """Add or replace the catalog entry for ``release.release``."""
        self.load_catalog([release])

    def load_catalog(self, releases: Iterable[Release]) -> None:
        """Add or replace several releases in one update."""
        merged = dict(self.releases)
        for release in releases:
            merged[release.release] = release
            logger.debug(
                "Loaded release %s with %d endpoints", release.release, len(release.endpoints)
            )
        self.graph.set("releases", merged)

    def set_filters(self, filters: Filters) -> None:
        self.graph.set("filters", filters)

    def update_filters(self, **fields: Any) -> None:
        """Replace some filter fields at once, e.g. ``update_filters(level="", category="")``."""
        if "test_tags" in fields:
            fields["test_tags"] = tuple(fields["test_tags"])
        self.graph.set("filters", dataclasses.replace(self.filters, **fields))

    def set_hover_path(self, nodes: HoverPath) -> None:
        self.graph.set("hover_path", tuple(nodes))

    def clear_hover_path(self) -> None:
        self.graph.set("hover_path", ())

    # -----------------------------------------------------------------
    # Outbound views
    # -----------------------------------------------------------------

    @property
    def releases(self) -> Mapping[str, Release]:
        return self.graph.get("releases")

    @property
    def filters(self) -> Filters:
        return self.graph.get("filters")

    @property
    def hover_path(self) -> HoverPath:
        return self.graph.get("hover_path")

    @property
    def active_release(self) -> Optional[Release]:
        return self.graph.get("active_release")

    @property
    def endpoints(self) -> tuple[Endpoint, ...]:
        return self.graph.get("endpoints")

    @property
    def grouped_endpoints(self) -> GroupedEndpoints:
        return self.graph.get("grouped_endpoints")

    @property
    def sunburst(self) -> Optional[BranchNode]:
        return self.graph.get("sunburst")

    @property
    def zoomed_sunburst(self) -> Optional[BranchNode]:
        return self.graph.get("zoomed_sunburst")

    @property
    def breadcrumb(self) -> Breadcrumb:
        return self.graph.get("breadcrumb")

    @property
    def current_depth(self) -> Depth:
        return self.graph.get("current_depth")

    @property
    def coverage_at_depth(self) -> Optional[CoverageSummary]:
        return self.graph.get("coverage_at_depth")

    @property
    def endpoint_coverage(self) -> EndpointDetail:
        return self.graph.get("endpoint_coverage")

    def subscribe(self, name: str, listener: Callable[[Any], None]) -> Callable[[], None]:
        """Follow one source or view; see :meth:`DerivationGraph.subscribe`."""
        return self.graph.subscribe(name, listener)

    def snapshot(self) -> dict[str, Any]:
        """Every source and view, read consistently."""
        return self.graph.snapshot()
