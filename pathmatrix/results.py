"""Queryable result of a many-to-many shortest path computation.

`ManyToManyShortestPaths` wraps the fully populated path cache produced by the
solver. It never recomputes anything: every query is a validated dictionary
lookup. Unreachable pairs are stored as None and reported with an infinite
weight rather than an exception, so weight matrices can be assembled without
error handling.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Sequence, Tuple

import pandas as pd

from pathmatrix.paths.path import GraphPath
from pathmatrix.types import INFINITE_WEIGHT, NodeID, SourceTargetPair, Weight

PathCache = Mapping[SourceTargetPair, Optional[GraphPath]]


class ManyToManyShortestPaths:
    """Immutable view over precomputed shortest paths.

    Attributes:
        sources: Source vertices captured at construction.
        targets: Target vertices captured at construction.
    """

    __slots__ = ("_source_order", "_target_order", "_sources", "_targets", "_paths")

    def __init__(
        self,
        sources: Sequence[NodeID],
        targets: Sequence[NodeID],
        paths: Dict[SourceTargetPair, Optional[GraphPath]],
    ) -> None:
        """Wrap a populated cache.

        Args:
            sources: Distinct source vertices in enumeration order.
            targets: Distinct target vertices in enumeration order.
            paths: Cache with one entry per (source, target) pair. The view
                takes a private copy, so later changes to ``paths`` are not seen.
        """
        self._source_order: Tuple[NodeID, ...] = tuple(sources)
        self._target_order: Tuple[NodeID, ...] = tuple(targets)
        self._sources: FrozenSet[NodeID] = frozenset(self._source_order)
        self._targets: FrozenSet[NodeID] = frozenset(self._target_order)
        self._paths: PathCache = MappingProxyType(dict(paths))

    @property
    def sources(self) -> FrozenSet[NodeID]:
        return self._sources

    @property
    def targets(self) -> FrozenSet[NodeID]:
        return self._targets

    def _assert_correct_source_and_target(
        self, source: NodeID, target: NodeID
    ) -> SourceTargetPair:
        if source not in self._sources:
            raise ValueError(f"Vertex '{source}' is not among the sources.")
        if target not in self._targets:
            raise ValueError(f"Vertex '{target}' is not among the targets.")
        return SourceTargetPair(source, target)

    def get_path(self, source: NodeID, target: NodeID) -> Optional[GraphPath]:
        """Return the cached shortest path from ``source`` to ``target``.

        Args:
            source: A vertex from the source set.
            target: A vertex from the target set.

        Returns:
            The path, or None when ``target`` is unreachable from ``source``.

        Raises:
            ValueError: If ``source`` is not a source or ``target`` is not a target.
        """
        return self._paths[self._assert_correct_source_and_target(source, target)]

    def get_weight(self, source: NodeID, target: NodeID) -> Weight:
        """Return the shortest path weight from ``source`` to ``target``.

        Args:
            source: A vertex from the source set.
            target: A vertex from the target set.

        Returns:
            The path's own weight, or ``math.inf`` when unreachable.

        Raises:
            ValueError: If ``source`` is not a source or ``target`` is not a target.
        """
        path = self.get_path(source, target)
        if path is None:
            return INFINITE_WEIGHT
        return path.weight

    def is_reachable(self, source: NodeID, target: NodeID) -> bool:
        """Return True if a path from ``source`` to ``target`` was found."""
        return self.get_path(source, target) is not None

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, pair: object) -> bool:
        return pair in self._paths

    def items(self) -> Iterator[Tuple[SourceTargetPair, Optional[GraphPath]]]:
        """Iterate cache entries in source-major enumeration order."""
        for source in self._source_order:
            for target in self._target_order:
                key = SourceTargetPair(source, target)
                yield key, self._paths[key]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the weight matrix as a DataFrame.

        Rows are sources and columns are targets, both in enumeration order.
        Unreachable pairs hold ``inf``.
        """
        data = [
            [self.get_weight(source, target) for target in self._target_order]
            for source in self._source_order
        ]
        return pd.DataFrame(
            data,
            index=pd.Index(list(self._source_order), name="source", dtype=object),
            columns=pd.Index(list(self._target_order), name="target", dtype=object),
            dtype=float,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe summary of every cached entry.

        Unreachable pairs are emitted with ``weight`` and ``nodes`` set to None.
        """
        entries = []
        for (source, target), path in self.items():
            entries.append(
                {
                    "source": source,
                    "target": target,
                    "weight": None if path is None else path.weight,
                    "nodes": None if path is None else list(path.nodes),
                }
            )
        return {
            "sources": list(self._source_order),
            "targets": list(self._target_order),
            "paths": entries,
        }

    def __repr__(self) -> str:
        reachable = sum(1 for path in self._paths.values() if path is not None)
        return (
            f"ManyToManyShortestPaths(sources={len(self._sources)}, "
            f"targets={len(self._targets)}, reachable={reachable}/{len(self._paths)})"
        )
