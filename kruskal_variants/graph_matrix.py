"""Graph stored as a flattened triangular adjacency matrix."""

from __future__ import annotations

import math
import random
from typing import Iterable, Optional, TypeVar

from .errors import InvalidCostRangeError, InvalidProbabilityError
from .graph import MAX_COST, Edge, Graph, Vertex

T = TypeVar("T")


def _validate(p: float, min_cost: int, max_cost: int) -> None:
    if math.isnan(p) or not 0.0 <= p <= 1.0:
        raise InvalidProbabilityError(p)
    if min_cost > max_cost:
        raise InvalidCostRangeError(min_cost, max_cost)


class GraphMatrix(Graph[T]):
    """Undirected graph backed by a compressed adjacency matrix and an edge cache."""

    def __init__(self) -> None:
        self._vertices: list[Vertex[T]] = []
        self._adj: list[int] = []
        self._edges: list[Edge] = []

    @classmethod
    def from_collection(cls, collection: Iterable[T]) -> "GraphMatrix[T]":
        """Build an edgeless graph with one vertex per item."""
        graph = cls()
        for item in collection:
            graph.add_vertex(item)
        return graph

    @classmethod
    def random(
        cls,
        collection: Iterable[T],
        p: float,
        min_cost: int,
        max_cost: int,
        no_self_loops: bool = True,
        rng: Optional[random.Random] = None,
    ) -> "GraphMatrix[T]":
        """Build an Erdős–Rényi G(n, p) graph with uniform integer costs."""
        _validate(p, min_cost, max_cost)
        rng = rng if rng is not None else random.Random()
        graph = cls.from_collection(collection)
        n = graph.num_vertices()
        for source in range(n):
            start = source + 1 if no_self_loops else source
            for target in range(start, n):
                if rng.random() < p:
                    graph.add_edge(source, target, rng.randint(min_cost, max_cost))
        return graph

    @staticmethod
    def _index(row: int, col: int) -> int:
        if row < 0 or col < 0:
            raise IndexError(f"vertex ({row}, {col}) out of range")
        if row > col:
            row, col = col, row
        return col * (col - 1) // 2 + row

    def adj_matrix(self) -> list[int]:
        """Return a copy of the compressed adjacency matrix."""
        return list(self._adj)

    def add_vertex(self, data: T) -> int:
        vertex_id = len(self._vertices)
        self._vertices.append(Vertex(vertex_id, data))
        size = self._index(vertex_id + 1, vertex_id + 1)
        self._adj.extend([MAX_COST] * (size - len(self._adj)))
        return vertex_id

    def add_edge(self, source: int, target: int, cost: int) -> None:
        index = self._index(source, target)
        if self._adj[index] == MAX_COST:
            self._edges.append(Edge(source, target, cost))
        self._adj[index] = cost

    def vertex(self, vertex_id: int) -> Optional[Vertex[T]]:
        if 0 <= vertex_id < len(self._vertices):
            return self._vertices[vertex_id]
        return None

    def vertices(self) -> tuple[Vertex[T], ...]:
        return tuple(self._vertices)

    def num_vertices(self) -> int:
        return len(self._vertices)

    def all_edges(self) -> list[Edge]:
        return list(self._edges)