"""Single-pair shortest path strategies and their registry."""

from __future__ import annotations

from functools import partial
from typing import Dict, Optional, Type

from pathmatrix.algorithms.base import (
    Graph,
    ShortestPathAlgorithm,
    StrategyFactory,
)
from pathmatrix.algorithms.bidirectional import BidirectionalDijkstraShortestPath
from pathmatrix.algorithms.nx_adapter import NetworkXShortestPath
from pathmatrix.algorithms.spf import DijkstraShortestPath, spf
from pathmatrix.config import SOLVER_CONFIG

STRATEGIES: Dict[str, Type[ShortestPathAlgorithm]] = {
    BidirectionalDijkstraShortestPath.name: BidirectionalDijkstraShortestPath,
    DijkstraShortestPath.name: DijkstraShortestPath,
    NetworkXShortestPath.name: NetworkXShortestPath,
}


def get_strategy_factory(
    name: Optional[str] = None, weight_attr: Optional[str] = None
) -> StrategyFactory:
    """Return a factory for a registered strategy.

    Args:
        name: Registry name; None selects ``SOLVER_CONFIG.default_strategy``.
        weight_attr: Optional edge weight attribute bound into the factory.

    Returns:
        Callable taking a graph and returning a strategy instance.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    key = name or SOLVER_CONFIG.default_strategy
    try:
        strategy_cls = STRATEGIES[key]
    except KeyError:
        raise ValueError(
            f"Unknown strategy '{key}'. Available: {sorted(STRATEGIES)}"
        ) from None
    if weight_attr is None:
        return strategy_cls
    return partial(strategy_cls, weight_attr=weight_attr)


def default_strategy_factory(graph: Graph) -> ShortestPathAlgorithm:
    """Build the configured default strategy for ``graph``."""
    return get_strategy_factory()(graph)


__all__ = [
    "STRATEGIES",
    "BidirectionalDijkstraShortestPath",
    "DijkstraShortestPath",
    "NetworkXShortestPath",
    "ShortestPathAlgorithm",
    "StrategyFactory",
    "default_strategy_factory",
    "get_strategy_factory",
    "spf",
]
