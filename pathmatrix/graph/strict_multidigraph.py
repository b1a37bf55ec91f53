"""Weighted multigraph built by the loaders and used in tests.

Any networkx graph works with the shortest path strategies. `StrictMultiDiGraph`
only adds what graph documents need: nodes declared once, arcs that refuse
unknown endpoints, graph-wide integer arc keys, and `add_link` for undirected
connections stored as two opposite arcs.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from pathmatrix.types import NodeID, Weight

EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """MultiDiGraph whose arcs are addressable by key alone.

    Arcs added without a key take the next value of a counter shared by the
    whole graph. An explicit integer key moves the counter past it, so later
    automatic keys never collide with loaded ones.
    """

    def __init__(self, *args, **kwargs) -> None:
        self._next_edge_id = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        return edge_id

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a node.

        Raises:
            ValueError: If the node is already present.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an arc between two existing nodes and return its key.

        Raises:
            ValueError: If an endpoint is missing or ``key`` is already used by
                an arc with the same endpoints.
        """
        for role, node in (("Source", u_for_edge), ("Target", v_for_edge)):
            if node not in self:
                raise ValueError(f"{role} node '{node}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        elif self.has_edge(u_for_edge, v_for_edge, key):
            raise ValueError(
                f"Arc {u_for_edge!r} -> {v_for_edge!r} with key '{key}' already exists."
            )
        elif isinstance(key, int):
            self._next_edge_id = max(self._next_edge_id, key + 1)

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        return key

    def add_link(
        self,
        u: NodeID,
        v: NodeID,
        weight: Weight = 1,
        weight_attr: str = "weight",
        **attr: Any,
    ) -> Tuple[EdgeID, EdgeID]:
        """Add an undirected connection as a pair of opposite arcs.

        Args:
            u: One endpoint.
            v: The other endpoint.
            weight: Weight stored on both arcs.
            weight_attr: Attribute name used for the weight.
            **attr: Extra attributes copied onto both arcs.

        Returns:
            Tuple of ``(forward_key, reverse_key)``.
        """
        attr[weight_attr] = weight
        return self.add_edge(u, v, **attr), self.add_edge(v, u, **dict(attr))

    def remove_link(self, u: NodeID, v: NodeID) -> None:
        """Remove every arc between u and v in both directions.

        Raises:
            ValueError: If there is no arc in either direction.
        """
        arcs = [
            (a, b, key)
            for a, b in ((u, v), (v, u))
            for key in self.edges_between(a, b)
        ]
        if not arcs:
            raise ValueError(f"No edges between '{u}' and '{v}' to remove.")
        self.remove_edges_from(arcs)

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List the keys of arcs from u to v (empty if none)."""
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v])

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Map each arc key to ``(src, dst, key, attrs)``.

        ``attrs`` is the live attribute dict of the arc.
        """
        return {
            key: (src, dst, key, attrs)
            for src, dst, key, attrs in self.edges(keys=True, data=True)
        }
