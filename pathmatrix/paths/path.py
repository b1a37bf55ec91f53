from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, FrozenSet, Iterator, Tuple

from pathmatrix.types import EdgeRef, NodeID, Weight


@dataclass(frozen=True)
class GraphPath:
    """
    A single path through a graph.

    Attributes:
        nodes (Tuple[NodeID, ...]):
            Vertices in traversal order, from source to destination.
        edges (Tuple[EdgeRef, ...]):
            Edges in traversal order; always one fewer than ``nodes``.
        weight (Weight):
            Total weight of the path as reported by the strategy that built it.
    """

    nodes: Tuple[NodeID, ...]
    edges: Tuple[EdgeRef, ...]
    weight: Weight

    def __post_init__(self) -> None:
        """
        Check that the vertex and edge sequences line up."""
        if not self.nodes:
            raise ValueError("A path must contain at least one node.")
        if len(self.edges) != len(self.nodes) - 1:
            raise ValueError(
                f"A path with {len(self.nodes)} nodes needs {len(self.nodes) - 1} "
                f"edges, got {len(self.edges)}."
            )

    @classmethod
    def trivial(cls, node: NodeID) -> GraphPath:
        """
        Return the zero-weight path consisting of a single vertex.

        Args:
            node: The only vertex of the path.

        Returns:
            A path with no edges and weight 0.
        """
        return cls(nodes=(node,), edges=(), weight=0.0)

    def __iter__(self) -> Iterator[NodeID]:
        """
        Iterate over the vertices of the path in order."""
        return iter(self.nodes)

    def __len__(self) -> int:
        """
        Return the number of edges in the path."""
        return len(self.edges)

    @property
    def src_node(self) -> NodeID:
        """
        Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """
        Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @property
    def is_trivial(self) -> bool:
        """
        True when the path is a single vertex with no edges."""
        return not self.edges

    @cached_property
    def node_set(self) -> FrozenSet[NodeID]:
        """
        Return the set of vertices visited by the path."""
        return frozenset(self.nodes)

    def __lt__(self, other: Any) -> bool:
        """
        Compare two paths based on their weight.

        Returns NotImplemented if `other` is not a GraphPath.
        """
        if not isinstance(other, GraphPath):
            return NotImplemented
        return self.weight < other.weight

    def __repr__(self) -> str:
        return f"GraphPath({list(self.nodes)}, weight={self.weight})"

    def to_dict(self) -> Dict[str, Any]:
        """
        Return a JSON-friendly representation of the path.

        Edge references are emitted as lists so that the result survives a
        JSON round trip unchanged.
        """
        return {
            "nodes": list(self.nodes),
            "edges": [list(edge) for edge in self.edges],
            "weight": self.weight,
        }
