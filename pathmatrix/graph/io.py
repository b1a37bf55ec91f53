"""Graph loading and serialization helpers.

Two formats are supported:

* node-link dicts (``graph``/``nodes``/``links``), round-trippable with
  `graph_to_node_link` and suitable for JSON;
* a compact YAML document used by the command line::

      directed: false
      nodes: [A, B, C]
      edges:
        - {source: A, target: B, weight: 1}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from pathmatrix.graph.strict_multidigraph import StrictMultiDiGraph
from pathmatrix.logging import get_logger
from pathmatrix.types import NodeID

logger = get_logger(__name__)

_ALLOWED_KEYS = {"directed", "nodes", "edges", "weight_attr"}


def graph_to_node_link(graph: StrictMultiDiGraph) -> Dict[str, Any]:
    """Convert a StrictMultiDiGraph into a node-link dict.

    Links refer to nodes by their index in the ``nodes`` list.

    Args:
        graph: The graph to convert.

    Returns:
        A dict with ``graph``, ``nodes`` and ``links`` keys.
    """
    node_dict = dict(graph.nodes(data=True))
    node_list = list(node_dict.keys())
    node_map = {node_id: i for i, node_id in enumerate(node_list)}

    return {
        "graph": dict(graph.graph),
        "nodes": [
            {"id": node_id, "attr": dict(node_dict[node_id])} for node_id in node_list
        ],
        "links": [
            {
                "source": node_map[src],
                "target": node_map[dst],
                "key": edge_id,
                "attr": dict(edge_attrs),
            }
            for edge_id, (src, dst, _, edge_attrs) in graph.get_edges().items()
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> StrictMultiDiGraph:
    """Rebuild a StrictMultiDiGraph from its node-link dict.

    Args:
        data: Mapping produced by `graph_to_node_link` (or compatible).

    Returns:
        The reconstructed graph.
    """
    graph = StrictMultiDiGraph(**data.get("graph", {}))

    node_map: Dict[int, NodeID] = {}
    for idx, node_obj in enumerate(data.get("nodes", [])):
        node_id = node_obj["id"]
        graph.add_node(node_id, **node_obj.get("attr", {}))
        node_map[idx] = node_id

    for edge_obj in data.get("links", []):
        graph.add_edge(
            node_map[edge_obj["source"]],
            node_map[edge_obj["target"]],
            key=edge_obj.get("key", None),
            **edge_obj.get("attr", {}),
        )

    return graph


def graph_from_dict(data: Dict[str, Any]) -> StrictMultiDiGraph:
    """Build a graph from the compact document format.

    Nodes listed under ``nodes`` are added first; edge endpoints that are not
    listed are added on first use. When ``directed`` is false every edge is
    stored as two opposite arcs. The document's ``weight_attr`` (default
    ``"weight"``) is recorded as ``graph.graph["weight_attr"]`` so callers
    search with the attribute the weights were stored under.

    Args:
        data: Parsed document.

    Returns:
        The constructed graph.

    Raises:
        ValueError: If the document shape is invalid.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph document must be a mapping at top-level.")

    extra = set(data.keys()) - _ALLOWED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in graph document: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(_ALLOWED_KEYS)}"
        )

    nodes = data.get("nodes", [])
    edges = data.get("edges", [])
    if not isinstance(nodes, list):
        raise ValueError("'nodes' must be a list")
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    directed = bool(data.get("directed", True))
    weight_attr = data.get("weight_attr", "weight")

    if not isinstance(weight_attr, str):
        raise ValueError("'weight_attr' must be a string")

    graph = StrictMultiDiGraph(weight_attr=weight_attr)
    for node in nodes:
        graph.add_node(node)

    for entry in edges:
        if not isinstance(entry, dict):
            raise ValueError(
                "Each edge definition must be a mapping with 'source' and 'target'"
            )
        if "source" not in entry or "target" not in entry:
            raise ValueError("Each edge definition must include 'source' and 'target'")

        src, dst = entry["source"], entry["target"]
        for endpoint in (src, dst):
            if endpoint not in graph:
                graph.add_node(endpoint)

        attrs = {k: v for k, v in entry.items() if k not in ("source", "target")}
        weight = attrs.pop(weight_attr, 1)
        if directed:
            graph.add_edge(src, dst, **{weight_attr: weight}, **attrs)
        else:
            graph.add_link(src, dst, weight=weight, weight_attr=weight_attr, **attrs)

    logger.debug(
        "Loaded graph with %d nodes and %d arcs (directed=%s)",
        graph.number_of_nodes(),
        graph.number_of_edges(),
        directed,
    )
    return graph


def load_graph_yaml(source: Union[str, Path]) -> StrictMultiDiGraph:
    """Load a graph from a YAML file in the compact document format.

    Args:
        source: Path to the YAML file.

    Returns:
        The constructed graph.
    """
    text = Path(source).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    return graph_from_dict(data)
