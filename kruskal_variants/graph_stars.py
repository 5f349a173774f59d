"""Graph stored as per-vertex adjacency lists (stars)."""

from __future__ import annotations

import random
from typing import Iterable, Optional, TypeVar

from .graph import Edge, Graph, Vertex
from .graph_matrix import _validate

T = TypeVar("T")


class GraphStars(Graph[T]):
    """Undirected graph where each vertex keeps the list of its incident edges."""

    def __init__(self) -> None:
        self._vertices: list[Vertex[T]] = []
        self._stars: list[list[Edge]] = []

    @classmethod
    def from_collection(cls, collection: Iterable[T]) -> "GraphStars[T]":
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
    ) -> "GraphStars[T]":
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

    def stars(self) -> list[list[Edge]]:
        """Return a copy of every vertex's adjacency list."""
        return [list(star) for star in self._stars]

    def add_vertex(self, data: T) -> int:
        vertex_id = len(self._vertices)
        self._vertices.append(Vertex(vertex_id, data))
        self._stars.append([])
        return vertex_id

    def add_edge(self, source: int, target: int, cost: int) -> None:
        if source < 0 or target < 0:
            raise IndexError(f"vertex ({source}, {target}) out of range")
        if source == target:
            return
        source_star = self._stars[source]
        target_star = self._stars[target]
        if any(e.target == target for e in source_star):
            return
        source_star.append(Edge(source, target, cost))
        target_star.append(Edge(target, source, cost))

    def vertex(self, vertex_id: int) -> Optional[Vertex[T]]:
        if 0 <= vertex_id < len(self._vertices):
            return self._vertices[vertex_id]
        return None

    def vertices(self) -> tuple[Vertex[T], ...]:
        return tuple(self._vertices)

    def num_vertices(self) -> int:
        return len(self._vertices)

    def all_edges(self) -> list[Edge]:
        return [
            edge
            for source, star in enumerate(self._stars)
            for edge in star
            if source < edge.target
        ]