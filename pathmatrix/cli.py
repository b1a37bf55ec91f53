"""Command-line interface for pathmatrix."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from pathmatrix.algorithms import STRATEGIES, get_strategy_factory
from pathmatrix.config import SOLVER_CONFIG
from pathmatrix.graph.io import load_graph_yaml
from pathmatrix.logging import get_logger, set_global_log_level
from pathmatrix.results import ManyToManyShortestPaths
from pathmatrix.solver import compute_many_to_many

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_weight(weight: Any) -> str:
    if weight is None or (isinstance(weight, float) and math.isinf(weight)):
        return "inf"
    return f"{weight:g}" if isinstance(weight, float) else str(weight)


def _render(result: ManyToManyShortestPaths, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(result.to_dict(), indent=2, default=str)
    if fmt == "csv":
        return result.to_dataframe().to_csv()

    rows = [
        [
            str(pair.source),
            str(pair.target),
            _format_weight(None if path is None else path.weight),
            "-" if path is None else " -> ".join(str(n) for n in path.nodes),
        ]
        for pair, path in result.items()
    ]
    return _format_table(["Source", "Target", "Weight", "Path"], rows)


def _run_matrix(
    graph_path: Path,
    sources: Optional[List[str]],
    targets: Optional[List[str]],
    strategy: Optional[str],
    workers: Optional[int],
    weight_attr: Optional[str],
    fmt: str,
    output: Optional[Path],
) -> None:
    """Load a graph, compute the shortest path matrix and print or save it."""
    logger.info(f"Loading graph from: {graph_path}")
    try:
        graph = load_graph_yaml(graph_path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        sys.exit(1)
    except ValueError as exc:
        logger.error(f"Invalid graph file {graph_path}: {exc}")
        sys.exit(1)

    all_nodes = list(graph.nodes)
    # Command-line tokens are strings; YAML may have loaded numeric node IDs.
    by_label = {str(node): node for node in all_nodes}
    tokens = [*(sources or []), *(targets or [])]
    missing = [token for token in tokens if token not in by_label]
    if missing:
        logger.error(f"Unknown vertices: {', '.join(sorted(set(missing)))}")
        sys.exit(1)

    source_list = [by_label[token] for token in sources] if sources else all_nodes
    target_list = [by_label[token] for token in targets] if targets else all_nodes

    if weight_attr is None:
        weight_attr = graph.graph.get("weight_attr")
    factory = get_strategy_factory(strategy, weight_attr)

    start = perf_counter()
    try:
        result = compute_many_to_many(
            graph,
            source_list,
            target_list,
            strategy_factory=factory,
            max_workers=workers,
        )
    except (KeyError, ValueError) as exc:
        logger.error(f"Shortest path computation failed: {exc}")
        sys.exit(1)
    logger.info(
        f"Computed {len(result)} shortest paths in {perf_counter() - start:.3f}s"
    )

    rendered = _render(result, fmt)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered + ("" if rendered.endswith("\n") else "\n"))
        logger.info(f"Results written to: {output}")
    else:
        print(rendered)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathmatrix`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathmatrix",
        description="Compute shortest paths between sets of graph vertices.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{matrix}",
        help="Available commands",
    )

    matrix_parser = subparsers.add_parser(
        "matrix", help="Compute the source x target shortest path matrix"
    )
    matrix_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    matrix_parser.add_argument(
        "--sources", "-s", nargs="+", help="Source vertices (default: all nodes)"
    )
    matrix_parser.add_argument(
        "--targets", "-t", nargs="+", help="Target vertices (default: all nodes)"
    )
    matrix_parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default=None,
        help=f"Single-pair strategy (default: {SOLVER_CONFIG.default_strategy})",
    )
    matrix_parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Worker threads for the computation",
    )
    matrix_parser.add_argument(
        "--weight-attr",
        default=None,
        help=f"Edge weight attribute (default: {SOLVER_CONFIG.weight_attr})",
    )
    matrix_parser.add_argument(
        "--format",
        "-f",
        dest="fmt",
        choices=["table", "json", "csv"],
        default="table",
        help="Output format",
    )
    matrix_parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Write output to this file"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "matrix":
        _run_matrix(
            graph_path=args.graph,
            sources=args.sources,
            targets=args.targets,
            strategy=args.strategy,
            workers=args.workers,
            weight_attr=args.weight_attr,
            fmt=args.fmt,
            output=args.output,
        )


if __name__ == "__main__":
    main()
