"""Quicksort Kruskal whose pivot is skewed towards light edges."""

import random
from typing import Optional

from .graph import Edge
from .qs_kruskal import _PartitionedKruskal


class SkewedFilterKruskal(_PartitionedKruskal):
    """Kruskal that picks the lightest of a few random pivots for each range."""

    def _pick_pivot(self, p: int, q: int, rng: random.Random) -> int:
        samples = min(max((q - p + 1) // 100, 1), 5)
        candidates = [rng.randint(p, q) for _ in range(samples)]
        # min keeps the earliest on ties, so p wins unless a sample is strictly lighter.
        return min([p, *candidates], key=lambda i: self._edges[i].weight)

    def run(self, rng: Optional[random.Random] = None) -> tuple[list[Edge], int]:
        """Return the spanning tree (or forest) edges and their total cost."""
        return self._solve(rng)