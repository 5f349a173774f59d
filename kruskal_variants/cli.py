"""Command that builds a random graph and prints its minimum spanning tree."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from .errors import GraphError
from .graph_matrix import GraphMatrix
from .kruskal import Kruskal


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the minimum spanning tree of a random graph."
    )
    parser.add_argument("--vertices", type=int, default=10, help="number of vertices")
    parser.add_argument("--probability", type=float, default=0.5, help="edge probability")
    parser.add_argument("--min-cost", type=int, default=1, help="minimum edge cost")
    parser.add_argument("--max-cost", type=int, default=100, help="maximum edge cost")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the process exit status."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        graph = GraphMatrix.random(
            range(args.vertices),
            args.probability,
            args.min_cost,
            args.max_cost,
            True,
            rng,
        )
    except GraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated a random graph with {graph.num_vertices()} vertices.")
    mst_edges, total_cost = Kruskal(graph).run()
    print("MST Calculation complete.")
    print(f"Total Cost: {total_cost}")
    print(f"Edges in MST: {len(mst_edges)}")
    for edge in mst_edges:
        print(f"  {edge.source} -> {edge.target} (cost: {edge.weight})")
    return 0


if __name__ == "__main__":
    sys.exit(main())