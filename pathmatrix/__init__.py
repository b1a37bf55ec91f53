"""pathmatrix: many-to-many shortest paths over weighted graphs.

Every (source, target) pair is answered by a pluggable single-pair shortest
path strategy and cached, so queries against the result are plain lookups.

Primary API:
    compute_many_to_many() - Compute paths for every source/target pair
    ManyToManyShortestPaths - Queryable, read-only result
    StrictMultiDiGraph - Weighted multi-directed graph
    ShortestPathAlgorithm - Base class for single-pair strategies

Example:
    from pathmatrix import StrictMultiDiGraph, compute_many_to_many

    g = StrictMultiDiGraph()
    for node in "ABC":
        g.add_node(node)
    g.add_link("A", "B", weight=1)
    g.add_link("B", "C", weight=2)

    result = compute_many_to_many(g, sources={"A"}, targets={"B", "C"})
    result.get_weight("A", "C")  # 3
"""

from __future__ import annotations

from pathmatrix import cli, logging
from pathmatrix.algorithms import (
    STRATEGIES,
    BidirectionalDijkstraShortestPath,
    DijkstraShortestPath,
    NetworkXShortestPath,
    ShortestPathAlgorithm,
    StrategyFactory,
    get_strategy_factory,
)
from pathmatrix.config import SOLVER_CONFIG, SolverConfig
from pathmatrix.graph import StrictMultiDiGraph
from pathmatrix.paths import GraphPath
from pathmatrix.results import ManyToManyShortestPaths
from pathmatrix.solver import DefaultManyToManyShortestPaths, compute_many_to_many
from pathmatrix.types import INFINITE_WEIGHT, SourceTargetPair

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "compute_many_to_many",
    "DefaultManyToManyShortestPaths",
    "ManyToManyShortestPaths",
    "SourceTargetPair",
    "INFINITE_WEIGHT",
    # Strategies
    "ShortestPathAlgorithm",
    "StrategyFactory",
    "BidirectionalDijkstraShortestPath",
    "DijkstraShortestPath",
    "NetworkXShortestPath",
    "STRATEGIES",
    "get_strategy_factory",
    # Model
    "StrictMultiDiGraph",
    "GraphPath",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Utilities
    "cli",
    "logging",
]
