"""Coverage counts and endpoint detail at the breadcrumb's depth."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..models import EMPTY_DETAIL, Breadcrumb, CoverageSummary, Depth, Endpoint, EndpointDetail

logger = logging.getLogger(__name__)


def breadcrumb_predicate(breadcrumb: Breadcrumb) -> Callable[[Endpoint], bool]:
    """Endpoint filter keyed by breadcrumb length.

    More than three crumbs uses the three-key filter.
    """
    if not breadcrumb:
        return lambda ep: True
    if len(breadcrumb) == 1:
        return lambda ep: ep.level == breadcrumb[0]
    if len(breadcrumb) == 2:
        return lambda ep: ep.level == breadcrumb[0] and ep.category == breadcrumb[1]
    return lambda ep: (
        ep.level == breadcrumb[0]
        and ep.category == breadcrumb[1]
        and ep.endpoint == breadcrumb[2]
    )


def coverage_at_depth(
    breadcrumb: Breadcrumb, endpoints: Sequence[Endpoint]
) -> Optional[CoverageSummary]:
    """Count total, tested and conformance-tested endpoints in scope.

    Returns None when there is no data at all, as distinct from a scope
    with zero coverage.
    """
    if not endpoints:
        return None

    in_scope = list(filter(breadcrumb_predicate(breadcrumb), endpoints))
    return CoverageSummary(
        total_endpoints=len(in_scope),
        tested_endpoints=sum(1 for ep in in_scope if ep.tested),
        conf_tested_endpoints=sum(1 for ep in in_scope if ep.conf_tested),
    )


def endpoint_detail(
    breadcrumb: Breadcrumb, depth: Depth, endpoints: Sequence[Endpoint]
) -> EndpointDetail:
    """Detail record of the endpoint named by the third crumb.

    Anything short of a single endpoint in focus, including an endpoint id
    missing from the catalog, yields the empty default record.
    """
    if not endpoints or depth is not Depth.ENDPOINT:
        return EMPTY_DETAIL

    endpoint_id = breadcrumb[2]
    for endpoint in endpoints:
        if endpoint.endpoint == endpoint_id:
            return EndpointDetail.from_endpoint(endpoint)

    logger.debug("Endpoint %r not in active release", endpoint_id)
    return EMPTY_DETAIL
