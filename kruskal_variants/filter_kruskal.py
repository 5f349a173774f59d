"""Quicksort Kruskal that filters out edges already inside a component."""

import random
from typing import Optional

from .graph import Edge
from .qs_kruskal import _PartitionedKruskal


class FilterKruskal(_PartitionedKruskal):
    """Kruskal that drops redundant edges from each range before partitioning it."""

    def _narrow(self, p: int, q: int) -> Optional[int]:
        find = self._forest.union_find.find
        kept = [e for e in self._edges[p : q + 1] if find(e.source) != find(e.target)]
        self._edges[p : p + len(kept)] = kept
        return p + len(kept) - 1 if kept else None

    def run(self, rng: Optional[random.Random] = None) -> tuple[list[Edge], int]:
        """Return the spanning tree (or forest) edges and their total cost."""
        return self._solve(rng)