"""Path value objects produced by shortest path strategies."""

from pathmatrix.paths.path import GraphPath

__all__ = ["GraphPath"]
