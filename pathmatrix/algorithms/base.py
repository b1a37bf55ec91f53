"""Single-pair shortest path strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from pathmatrix.config import SOLVER_CONFIG
from pathmatrix.paths.path import GraphPath
from pathmatrix.types import INFINITE_WEIGHT, NodeID

#: Any networkx graph (Graph, DiGraph, MultiGraph, MultiDiGraph).
Graph = Any


class ShortestPathAlgorithm(ABC):
    """Single-pair shortest path lookup bound to one graph.

    Implementations must be safe to call repeatedly for different pairs and
    must not keep per-query state on the instance, so that one instance can
    serve concurrent callers.

    Attributes:
        graph: The graph searched by this strategy (never mutated).
        weight_attr: Edge attribute holding the edge weight.
    """

    #: Registry name; also used in log records.
    name: str = "abstract"

    def __init__(self, graph: Graph, weight_attr: Optional[str] = None) -> None:
        self.graph = graph
        self.weight_attr = weight_attr or SOLVER_CONFIG.weight_attr

    @abstractmethod
    def get_path(self, source: NodeID, target: NodeID) -> Optional[GraphPath]:
        """Return a shortest path from ``source`` to ``target``.

        Args:
            source: Source vertex; must belong to the graph.
            target: Target vertex; must belong to the graph.

        Returns:
            The path, or None when ``target`` is unreachable.
        """

    def get_path_weight(self, source: NodeID, target: NodeID) -> float:
        """Return the shortest path weight, or infinity when unreachable."""
        path = self.get_path(source, target)
        if path is None:
            return INFINITE_WEIGHT
        return path.weight

    def _check_vertices(self, source: NodeID, target: NodeID) -> None:
        if source not in self.graph:
            raise KeyError(f"Source node '{source}' is not in the graph.")
        if target not in self.graph:
            raise KeyError(f"Target node '{target}' is not in the graph.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight_attr={self.weight_attr!r})"


#: Builds a strategy bound to a graph.
StrategyFactory = Callable[[Graph], ShortestPathAlgorithm]
