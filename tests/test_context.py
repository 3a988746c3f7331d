"""End-to-end tests for SunburstContext wiring."""

from datetime import date

from coverage_sunburst.config import SunburstConfig
from coverage_sunburst.context import SunburstContext
from coverage_sunburst.models import (
    EMPTY_DETAIL,
    CoverageSummary,
    Depth,
    Endpoint,
    Filters,
    NodeKind,
    Release,
)


def _hover(*names):
    return [{"data": {"name": name}} for name in names]


class TestInitialState:

    def test_placeholder_release_per_known_version(self, config):
        ctx = SunburstContext(config)
        assert set(ctx.releases) == {"1.19.0", "1.18.0"}
        assert ctx.releases["1.19.0"].endpoints == ()

    def test_no_version_selected(self, config):
        ctx = SunburstContext(config)
        assert ctx.active_release is None
        assert ctx.endpoints == ()
        assert ctx.breadcrumb == ()
        assert ctx.current_depth is Depth.ROOT

    def test_default_version_from_config(self):
        ctx = SunburstContext(SunburstConfig(releases=["1.19.0"], default_version="1.19.0"))
        assert ctx.filters.version == "1.19.0"
        assert ctx.active_release is ctx.releases["1.19.0"]

    def test_placeholder_release_has_empty_views(self, config):
        ctx = SunburstContext(config)
        ctx.update_filters(version="1.18.0")
        assert ctx.active_release is not None
        assert ctx.grouped_endpoints == {}
        assert ctx.sunburst is None
        assert ctx.zoomed_sunburst is None
        assert ctx.coverage_at_depth is None
        assert ctx.endpoint_coverage is EMPTY_DETAIL

    def test_unknown_version(self, ctx):
        ctx.update_filters(version="0.0.1")
        assert ctx.active_release is None
        assert ctx.sunburst is None
        assert ctx.coverage_at_depth is None


class TestEndToEnd:

    def test_two_endpoint_example(self):
        release = Release(
            release="v1",
            release_date=date(2020, 1, 1),
            endpoints=(
                Endpoint("GET /pods", "stable", "core", tested=True, conf_tested=False),
                Endpoint("GET /jobs", "stable", "core", tested=False, conf_tested=False),
            ),
        )
        ctx = SunburstContext(SunburstConfig(releases=[]))
        ctx.load_release(release)
        ctx.set_filters(Filters(version="v1", level="", category="", endpoint=""))

        assert ctx.coverage_at_depth == CoverageSummary(2, 1, 0)
        root = ctx.sunburst
        assert [n.name for n in root.children] == ["stable"]
        core = root.children[0].children
        assert [n.name for n in core] == ["core"]
        assert [leaf.name for leaf in core[0].children] == ["GET /jobs", "GET /pods"]
        assert ctx.zoomed_sunburst is root

    def test_drill_down(self, ctx):
        ctx.update_filters(level="stable")
        assert ctx.zoomed_sunburst.kind is NodeKind.LEVEL
        assert ctx.breadcrumb == ("stable",)
        assert ctx.current_depth is Depth.LEVEL
        assert ctx.coverage_at_depth == CoverageSummary(5, 3, 2)

        ctx.update_filters(category="core")
        assert ctx.zoomed_sunburst.name == "core"
        assert ctx.current_depth is Depth.CATEGORY
        assert ctx.coverage_at_depth == CoverageSummary(3, 2, 1)
        assert ctx.endpoint_coverage is EMPTY_DETAIL

        ctx.update_filters(endpoint="listCoreV1Pod")
        assert ctx.current_depth is Depth.ENDPOINT
        assert ctx.coverage_at_depth == CoverageSummary(1, 1, 0)
        assert ctx.endpoint_coverage.endpoint == "listCoreV1Pod"

    def test_hover_moves_focus(self, ctx):
        ctx.update_filters(level="stable", category="core", endpoint="listCoreV1Pod")
        ctx.set_hover_path(_hover("stable", "core", "readCoreV1Pod"))
        assert ctx.breadcrumb == ("stable", "core", "readCoreV1Pod")
        assert ctx.endpoint_coverage.kind == "Pod"

        ctx.clear_hover_path()
        assert ctx.breadcrumb == ("stable", "core", "listCoreV1Pod")
        assert ctx.endpoint_coverage.endpoint == "listCoreV1Pod"

    def test_hover_at_root(self, ctx):
        ctx.set_hover_path(_hover("beta"))
        assert ctx.current_depth is Depth.LEVEL
        assert ctx.coverage_at_depth == CoverageSummary(2, 1, 0)
        assert ctx.zoomed_sunburst is ctx.sunburst

    def test_stale_selection_degrades(self, ctx):
        ctx.update_filters(level="stable", category="core", endpoint="gone")
        assert ctx.endpoint_coverage is EMPTY_DETAIL
        assert ctx.coverage_at_depth == CoverageSummary(0, 0, 0)

    def test_replacing_a_release_rebuilds_views(self, ctx, release):
        extra = Endpoint("watchCoreV1Pod", "stable", "core", tested=True)
        ctx.load_release(Release(release="1.19.0", endpoints=release.endpoints + (extra,)))
        assert ctx.coverage_at_depth.total_endpoints == 9
        assert "watchCoreV1Pod" in {leaf.name for leaf in ctx.sunburst.leaves()}


class TestReactivity:

    def test_filter_change_does_not_rebuild_tree(self, ctx):
        trees = []
        ctx.subscribe("sunburst", trees.append)
        ctx.update_filters(level="stable")
        ctx.update_filters(category="core")
        assert len(trees) == 1

    def test_version_change_rebuilds_tree(self, ctx, config):
        other = Release(release="1.18.0", endpoints=(Endpoint("e", "beta", "c"),))
        ctx.load_release(other)
        trees = []
        ctx.subscribe("sunburst", trees.append)
        ctx.update_filters(version="1.18.0")
        assert len(trees) == 2
        assert [n.name for n in trees[-1].children] == ["beta"]

    def test_hover_does_not_touch_tree_or_zoom(self, ctx):
        zooms = []
        ctx.subscribe("zoomed_sunburst", zooms.append)
        ctx.set_hover_path(_hover("stable", "apps"))
        assert len(zooms) == 1

    def test_subscribers_see_matching_breadcrumb_and_coverage(self, ctx):
        pairs = []
        ctx.subscribe(
            "coverage_at_depth",
            lambda summary: pairs.append((ctx.breadcrumb, summary)),
        )
        ctx.update_filters(level="beta", category="batch")
        crumbs, summary = pairs[-1]
        assert crumbs == ("beta", "batch")
        assert summary == CoverageSummary(2, 1, 0)

    def test_snapshot_has_every_node(self, ctx):
        snap = ctx.snapshot()
        assert set(snap) == {
            "releases",
            "filters",
            "hover_path",
            "active_release",
            "endpoints",
            "grouped_endpoints",
            "sunburst",
            "zoomed_sunburst",
            "breadcrumb",
            "current_depth",
            "coverage_at_depth",
            "endpoint_coverage",
        }

    def test_update_filters_normalises_test_tags(self, ctx):
        ctx.update_filters(test_tags=["sig-node"], useragent="e2e.test")
        assert ctx.filters.test_tags == ("sig-node",)
        assert ctx.filters.useragent == "e2e.test"

    def test_config_colour_overrides(self, release):
        ctx = SunburstContext(SunburstConfig(releases=[], level_colours={"beta": "purple"}))
        ctx.load_release(release)
        ctx.update_filters(version="1.19.0")
        assert ctx.sunburst.child("beta").color == "purple"
