"""Derivation graph exceptions: wiring mistakes and invariant violations."""

from typing import Optional

from .base import CoverageSunburstError


class DerivationError(CoverageSunburstError):
    """Raised when the derivation graph is misused or a node fails to compute."""

    def __init__(self, message: str, node: Optional[str] = None):
        details = {"node": node} if node else None
        super().__init__(message, details=details)
        self.node = node


class UnknownNodeError(DerivationError):
    """Raised when a node name is not registered in the graph."""

    def __init__(self, node: str):
        super().__init__(f"Unknown node: {node}", node=node)


class InvariantViolationError(DerivationError):
    """Raised in strict mode when a derived value breaks a documented invariant."""

    pass
