"""Kruskal's algorithm driven by a binary heap of edges."""

import heapq

from .graph import Edge, Graph
from .union_find import UnionFind


class _SpanningForest:
    """Accumulates accepted edges and their cost while joining components."""

    def __init__(self, num_vertices: int) -> None:
        self.union_find = UnionFind(num_vertices)
        self.edges: list[Edge] = []
        self.cost = 0
        self._limit = num_vertices - 1

    @property
    def complete(self) -> bool:
        return len(self.edges) >= self._limit

    def offer(self, edge: Edge) -> bool:
        """Accept ``edge`` if it joins two components; report whether it did."""
        if not self.union_find.union(edge.source, edge.target):
            return False
        self.edges.append(edge)
        self.cost += edge.weight
        return True

    def result(self) -> tuple[list[Edge], int]:
        return list(self.edges), self.cost


class Kruskal:
    """Minimum spanning tree by repeatedly taking the cheapest edge from a heap."""

    def __init__(self, graph: Graph) -> None:
        self._heap = graph.all_edges()
        heapq.heapify(self._heap)
        self._forest = _SpanningForest(graph.num_vertices())

    def run(self) -> tuple[list[Edge], int]:
        """Return the spanning tree (or forest) edges and their total cost."""
        while self._heap and not self._forest.complete:
            self._forest.offer(heapq.heappop(self._heap))
        return self._forest.result()