"""Kruskal's algorithm that sorts edges lazily with a randomised quicksort."""

import random
from typing import Optional

from .graph import Edge, Graph
from .kruskal import _SpanningForest


def _partition(edges: list[Edge], p: int, q: int) -> int:
    """Partition ``edges[p..q]`` around the pivot at ``p``; return the pivot's final index."""
    pivot_weight = edges[p].weight
    e_plus = q
    e_minus = p
    while e_minus <= e_plus:
        while edges[e_plus].weight > pivot_weight and e_plus > 0:
            e_plus -= 1
        while e_minus <= e_plus and edges[e_minus].weight <= pivot_weight:
            e_minus += 1
        if e_minus < e_plus:
            edges[e_minus], edges[e_plus] = edges[e_plus], edges[e_minus]
            e_minus += 1
            e_plus = max(e_plus - 1, 0)
    edges[p], edges[e_plus] = edges[e_plus], edges[p]
    return e_plus


class _PartitionedKruskal:
    """Kruskal that settles edges in weight order by partitioning ranges on a stack."""

    def __init__(self, graph: Graph) -> None:
        self._edges = graph.all_edges()
        self._forest = _SpanningForest(graph.num_vertices())

    def _narrow(self, p: int, q: int) -> Optional[int]:
        """Return the new end of range ``p..q`` before it is processed, or None if empty."""
        return q

    def _pick_pivot(self, p: int, q: int, rng: random.Random) -> int:
        return rng.randint(p, q)

    def _solve(self, rng: Optional[random.Random]) -> tuple[list[Edge], int]:
        if not self._edges:
            return [], 0
        if rng is None:
            rng = random.Random()
        edges = self._edges
        forest = self._forest
        stack = [(0, len(edges) - 1)]
        while stack and not forest.complete:
            p, q = stack.pop()
            q = self._narrow(p, q)
            if q is None:
                continue
            if p == q:
                forest.offer(edges[p])
                continue
            pivot = self._pick_pivot(p, q, rng)
            edges[p], edges[pivot] = edges[pivot], edges[p]
            split = _partition(edges, p, q)
            if split < q:
                stack.append((split + 1, q))
            stack.append((split, split))
            if split > p:
                stack.append((p, split - 1))
        return forest.result()


class QuickSortKruskal(_PartitionedKruskal):
    """Kruskal that processes edges in the order a quicksort settles them."""

    def run(self, rng: Optional[random.Random] = None) -> tuple[list[Edge], int]:
        """Return the spanning tree (or forest) edges and their total cost."""
        return self._solve(rng)