"""Reactive derivation graph."""

from .graph import DerivationGraph

__all__ = ["DerivationGraph"]
