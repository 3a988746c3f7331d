"""Active release selection and endpoint list projection."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..models import Endpoint, Filters, Release

logger = logging.getLogger(__name__)


def select_active_release(
    releases: Mapping[str, Release], filters: Filters
) -> Optional[Release]:
    """Return the release keyed by the selected version, or None."""
    if not filters.version:
        return None
    release = releases.get(filters.version)
    if release is None:
        logger.debug("No release loaded for version %r", filters.version)
    return release


def project_endpoints(release: Optional[Release]) -> tuple[Endpoint, ...]:
    if release is None:
        return ()
    return tuple(release.endpoints)
