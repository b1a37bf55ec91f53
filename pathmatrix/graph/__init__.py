"""Graph primitives and helpers.

This package provides the strict multi-directed graph type `StrictMultiDiGraph`
and loaders for node-link dicts and YAML graph documents (`io`).
"""

from pathmatrix.graph.strict_multidigraph import (
    AttrDict,
    EdgeID,
    EdgeTuple,
    StrictMultiDiGraph,
)

__all__ = ["AttrDict", "EdgeID", "EdgeTuple", "StrictMultiDiGraph"]
