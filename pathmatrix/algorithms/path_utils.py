from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pathmatrix.paths.path import GraphPath
from pathmatrix.types import EdgeRef, NodeID, Weight

#: Search-tree link: node -> (neighbor one step closer to the tree root, edge).
PredMap = Dict[NodeID, Optional[Tuple[NodeID, EdgeRef]]]


def walk_to_root(
    node: NodeID, tree: PredMap
) -> Tuple[List[NodeID], List[EdgeRef]]:
    """
    Follow search-tree links from ``node`` until the root is reached.

    Args:
        node: Starting node; must be present in ``tree``.
        tree: Links produced by a search; the root maps to None.

    Returns:
        Tuple of (nodes, edges) in walk order, starting at ``node`` and ending
        at the root.
    """
    nodes = [node]
    edges: List[EdgeRef] = []
    link = tree[node]
    while link is not None:
        next_node, edge = link
        nodes.append(next_node)
        edges.append(edge)
        link = tree[next_node]
    return nodes, edges


def resolve_to_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: PredMap,
    weight: Weight,
) -> Optional[GraphPath]:
    """
    Build the source->destination path from a single-predecessor map.

    Args:
        src_node: Source node ID (the root of ``pred``).
        dst_node: Destination node ID.
        pred: Predecessor map from a forward search.
        weight: Total path weight to record on the result.

    Returns:
        The path, or None if ``dst_node`` was never reached.
    """
    if dst_node not in pred:
        return None
    nodes, edges = walk_to_root(dst_node, pred)
    nodes.reverse()
    edges.reverse()
    if nodes[0] != src_node:
        raise ValueError(
            f"Predecessor map is rooted at '{nodes[0]}', expected '{src_node}'."
        )
    return GraphPath(nodes=tuple(nodes), edges=tuple(edges), weight=weight)


def join_at(
    meeting_node: NodeID,
    forward_pred: PredMap,
    backward_succ: PredMap,
    weight: Weight,
) -> GraphPath:
    """
    Join a forward and a backward search tree at a common node.

    Args:
        meeting_node: Node reached by both searches.
        forward_pred: Forward tree rooted at the source.
        backward_succ: Backward tree rooted at the target; each link points
            one step closer to the target.
        weight: Total path weight to record on the result.

    Returns:
        The joined source->target path.
    """
    head_nodes, head_edges = walk_to_root(meeting_node, forward_pred)
    head_nodes.reverse()
    head_edges.reverse()
    tail_nodes, tail_edges = walk_to_root(meeting_node, backward_succ)
    return GraphPath(
        nodes=tuple(head_nodes + tail_nodes[1:]),
        edges=tuple(head_edges + tail_edges),
        weight=weight,
    )
