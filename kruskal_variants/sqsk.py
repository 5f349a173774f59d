"""Star QuickSort Kruskal: lazily sorts each vertex's adjacency list."""

from __future__ import annotations

import heapq

from .graph import Edge
from .graph_stars import GraphStars
from .union_find import UnionFind


class StarQuickSortKruskal:
    """Kruskal over adjacency lists, pulling each vertex's next cheapest edge on demand."""

    def __init__(self, graph: GraphStars) -> None:
        num_vertices = graph.num_vertices()
        self._union_find = UnionFind(num_vertices)
        self._stars = graph.stars()
        self._stacks: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
        self._last_sorted = [0] * num_vertices
        # Items are (cost, -vertex_id, edge_index): cheapest first, higher id first on ties.
        self._heap: list[tuple[int, int, int]] = []
        self._mst_edges: list[Edge] = []
        self._mst_cost = 0

        for vertex_id, star in enumerate(self._stars):
            if star:
                self._stacks[vertex_id].append((0, len(star) - 1))
                self.qs_step(vertex_id)
                heapq.heappush(self._heap, (star[0].weight, -vertex_id, 0))

    def qs_step(self, vertex_id: int) -> None:
        """Quickselect the next unsorted position of ``vertex_id``'s star into place."""
        star = self._stars[vertex_id]
        target = self._last_sorted[vertex_id]
        if target >= len(star):
            return
        stack = self._stacks[vertex_id]
        if not stack:
            return
        p, q = stack.pop()
        while p < q:
            pivot = p + (q - p) // 2
            star[pivot], star[q] = star[q], star[pivot]
            pivot_weight = star[q].weight
            i = p
            for j in range(p, q):
                if star[j].weight < pivot_weight:
                    star[i], star[j] = star[j], star[i]
                    i += 1
            star[i], star[q] = star[q], star[i]
            if i == target:
                if i < q:
                    stack.append((i + 1, q))
                return
            if i < target:
                p = i + 1
            else:
                stack.append((i, q))
                q = i - 1

    def run(self) -> tuple[list[Edge], int]:
        """Return the spanning tree (or forest) edges and their total cost."""
        num_vertices = len(self._stars)
        count = 0
        while count < num_vertices - 1 and self._heap:
            _, neg_id, edge_index = heapq.heappop(self._heap)
            i = -neg_id
            position = self._last_sorted[i]
            if edge_index != position:
                continue
            star = self._stars[i]
            edge = star[position]
            if self._union_find.union(i, edge.target):
                self._mst_edges.append(Edge(i, edge.target, edge.weight))
                self._mst_cost += edge.weight
                count += 1
            position += 1
            self._last_sorted[i] = position
            if position < len(star):
                self.qs_step(i)
                heapq.heappush(self._heap, (star[position].weight, -i, position))
        return list(self._mst_edges), self._mst_cost