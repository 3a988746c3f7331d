"""Catalog loading exceptions."""

from pathlib import Path
from typing import Optional

from .base import CoverageSunburstError


class CatalogError(CoverageSunburstError):
    """Raised when a release catalog cannot be parsed into records."""

    def __init__(self, reason: str, source: Optional[Path] = None):
        details = {"reason": reason}
        if source is not None:
            details["source"] = str(source)
        super().__init__(f"Invalid catalog: {reason}", details=details)
        self.reason = reason
        self.source = source
