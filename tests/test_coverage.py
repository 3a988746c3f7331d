"""Tests for derivations.coverage — counts and endpoint detail."""

from coverage_sunburst.derivations.coverage import coverage_at_depth, endpoint_detail
from coverage_sunburst.models import EMPTY_DETAIL, CoverageSummary, Depth, Endpoint


class TestCoverageAtDepth:

    def test_no_endpoints_is_none(self):
        assert coverage_at_depth((), ()) is None
        assert coverage_at_depth(("stable",), ()) is None

    def test_root_counts_everything(self, endpoints):
        assert coverage_at_depth((), endpoints) == CoverageSummary(
            total_endpoints=8, tested_endpoints=4, conf_tested_endpoints=2
        )

    def test_level(self, endpoints):
        assert coverage_at_depth(("stable",), endpoints) == CoverageSummary(5, 3, 2)

    def test_category(self, endpoints):
        assert coverage_at_depth(("beta", "batch"), endpoints) == CoverageSummary(2, 1, 0)

    def test_endpoint(self, endpoints):
        summary = coverage_at_depth(("stable", "core", "readCoreV1Pod"), endpoints)
        assert summary == CoverageSummary(1, 1, 1)

    def test_scope_with_no_matches_is_zero_not_none(self, endpoints):
        assert coverage_at_depth(("ga",), endpoints) == CoverageSummary(0, 0, 0)

    def test_category_must_match_level(self, endpoints):
        assert coverage_at_depth(("beta", "core"), endpoints).total_endpoints == 0

    def test_overlong_breadcrumb_uses_three_keys(self, endpoints):
        summary = coverage_at_depth(("stable", "core", "listCoreV1Pod", "extra"), endpoints)
        assert summary == CoverageSummary(1, 1, 0)

    def test_end_to_end_example(self):
        eps = [
            Endpoint("GET /pods", "stable", "core", tested=True, conf_tested=False),
            Endpoint("GET /jobs", "stable", "core", tested=False, conf_tested=False),
        ]
        assert coverage_at_depth((), eps) == CoverageSummary(2, 1, 0)


class TestEndpointDetail:

    def test_default_record_is_all_empty_strings(self):
        assert EMPTY_DETAIL.tested == ""
        assert EMPTY_DETAIL.conf_tested == ""
        assert EMPTY_DETAIL.endpoint == ""
        assert EMPTY_DETAIL.kind == ""
        assert EMPTY_DETAIL.is_empty

    def test_not_at_endpoint_depth(self, endpoints):
        assert endpoint_detail(("stable", "core"), Depth.CATEGORY, endpoints) is EMPTY_DETAIL

    def test_no_endpoints(self):
        crumbs = ("stable", "core", "readCoreV1Pod")
        assert endpoint_detail(crumbs, Depth.ENDPOINT, ()) is EMPTY_DETAIL

    def test_projects_renamed_fields(self, endpoints):
        crumbs = ("stable", "core", "readCoreV1Pod")
        detail = endpoint_detail(crumbs, Depth.ENDPOINT, endpoints)
        assert detail.endpoint == "readCoreV1Pod"
        assert detail.tested is True
        assert detail.conf_tested is True
        assert detail.path == "/api/v1/namespaces/{namespace}/pods/{name}"
        assert detail.description == "read the specified Pod"
        assert detail.group == ""
        assert detail.version == "v1"
        assert detail.kind == "Pod"
        assert not detail.is_empty

    def test_untested_endpoint_keeps_false_flags(self, endpoints):
        crumbs = ("stable", "core", "deleteCoreV1Pod")
        detail = endpoint_detail(crumbs, Depth.ENDPOINT, endpoints)
        assert detail.tested is False
        assert detail.conf_tested is False

    def test_unknown_endpoint_gives_default(self, endpoints):
        crumbs = ("stable", "core", "readCoreV9Unicorn")
        assert endpoint_detail(crumbs, Depth.ENDPOINT, endpoints) is EMPTY_DETAIL
