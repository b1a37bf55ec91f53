"""Naive many-to-many shortest paths.

For every (source, target) pair a single-pair strategy is asked for a
shortest path and the answer is cached. No search state is shared between
pairs, so a computation performs exactly ``len(sources) * len(targets)``
strategy calls. The pluggable strategy is supplied as a factory that binds it
to the graph; one instance is built per computation.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from time import perf_counter
from typing import Dict, Iterable, List, Optional, Tuple

from pathmatrix.algorithms import default_strategy_factory
from pathmatrix.algorithms.base import Graph, ShortestPathAlgorithm, StrategyFactory
from pathmatrix.config import SOLVER_CONFIG
from pathmatrix.logging import get_logger
from pathmatrix.paths.path import GraphPath
from pathmatrix.results import ManyToManyShortestPaths
from pathmatrix.types import NodeID, SourceTargetPair

logger = get_logger(__name__)


def _distinct(vertices: Iterable[NodeID]) -> List[NodeID]:
    """Drop duplicates while keeping first-seen order."""
    return list(dict.fromkeys(vertices))


class DefaultManyToManyShortestPaths:
    """Computes many-to-many shortest paths one pair at a time.

    Attributes:
        graph: The graph searched (never mutated).
        strategy_factory: Builds the single-pair strategy for ``graph``.
        max_workers: Worker threads for the population loop, or None to use
            ``SOLVER_CONFIG.max_workers``.
    """

    def __init__(
        self,
        graph: Graph,
        strategy_factory: Optional[StrategyFactory] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self.graph = graph
        self.strategy_factory = strategy_factory or default_strategy_factory
        self.max_workers = max_workers

    def get_many_to_many_paths(
        self, sources: Iterable[NodeID], targets: Iterable[NodeID]
    ) -> ManyToManyShortestPaths:
        """Compute and cache a shortest path for every source/target pair.

        Args:
            sources: Source vertices. Empty is allowed.
            targets: Target vertices. Empty is allowed.

        Returns:
            ManyToManyShortestPaths: Read-only view over the populated cache.

        Raises:
            TypeError: If ``sources`` or ``targets`` is None.
            ValueError: If the worker count is smaller than 1.
            Exception: Whatever the strategy raises, unchanged.
        """
        if sources is None:
            raise TypeError("sources cannot be None")
        if targets is None:
            raise TypeError("targets cannot be None")

        source_list = _distinct(sources)
        target_list = _distinct(targets)
        workers = SOLVER_CONFIG.resolve_workers(self.max_workers)

        algorithm = self.strategy_factory(self.graph)
        pairs = [
            SourceTargetPair(source, target)
            for source in source_list
            for target in target_list
        ]
        logger.debug(
            "Computing %d shortest paths (%d sources x %d targets) with %s, workers=%d",
            len(pairs),
            len(source_list),
            len(target_list),
            getattr(algorithm, "name", type(algorithm).__name__),
            workers,
        )

        started = perf_counter()
        if workers > 1 and len(pairs) > 1:
            paths = self._populate_parallel(algorithm, pairs, workers)
        else:
            paths = self._populate(algorithm, pairs)

        logger.debug(
            "Computed %d shortest paths in %.6fs (%d reachable)",
            len(paths),
            perf_counter() - started,
            sum(1 for path in paths.values() if path is not None),
        )
        return ManyToManyShortestPaths(source_list, target_list, paths)

    @staticmethod
    def _populate(
        algorithm: ShortestPathAlgorithm, pairs: List[SourceTargetPair]
    ) -> Dict[SourceTargetPair, Optional[GraphPath]]:
        paths: Dict[SourceTargetPair, Optional[GraphPath]] = {}
        for pair in pairs:
            paths[pair] = algorithm.get_path(pair.source, pair.target)
        return paths

    @staticmethod
    def _populate_parallel(
        algorithm: ShortestPathAlgorithm,
        pairs: List[SourceTargetPair],
        workers: int,
    ) -> Dict[SourceTargetPair, Optional[GraphPath]]:
        # Results are collected in submission order, so the first failing
        # pair (in enumeration order) decides which exception is raised.
        paths: Dict[SourceTargetPair, Optional[GraphPath]] = {}
        executor = ThreadPoolExecutor(max_workers=workers)
        try:
            futures: List[Tuple[SourceTargetPair, Future]] = [
                (pair, executor.submit(algorithm.get_path, pair.source, pair.target))
                for pair in pairs
            ]
            for pair, future in futures:
                paths[pair] = future.result()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
        return paths


def compute_many_to_many(
    graph: Graph,
    sources: Iterable[NodeID],
    targets: Iterable[NodeID],
    strategy_factory: Optional[StrategyFactory] = None,
    max_workers: Optional[int] = None,
) -> ManyToManyShortestPaths:
    """Compute shortest paths between every source and every target.

    Args:
        graph: Any networkx graph.
        sources: Source vertices.
        targets: Target vertices.
        strategy_factory: Callable binding a single-pair strategy to ``graph``.
            Defaults to bidirectional Dijkstra.
        max_workers: Worker threads for the population loop; None uses the
            configured default.

    Returns:
        ManyToManyShortestPaths: Read-only view over the populated cache.
    """
    return DefaultManyToManyShortestPaths(
        graph, strategy_factory, max_workers
    ).get_many_to_many_paths(sources, targets)
