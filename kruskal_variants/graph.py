"""Core graph types shared by the representations and algorithms."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

MAX_COST = 2**64 - 1
ZERO_COST = 0

_Data = TypeVar("_Data")


@dataclass(frozen=True, order=True)
class Edge:
    """A weighted edge; edges compare and order by weight only."""

    source: int = field(compare=False)
    target: int = field(compare=False)
    weight: int


@dataclass
class Vertex(Generic[_Data]):
    """A vertex with its identifier and carried data."""

    id: int
    data: _Data


class Graph(ABC, Generic[_Data]):
    """Interface that the graph representations implement.

    ``add_vertex`` returns the new identifier, ``vertex`` returns None for an
    unknown identifier, ``vertices`` lists vertices in identifier order and
    ``all_edges`` lists every edge once.
    """

    @abstractmethod
    def add_vertex(self, data: _Data) -> int: ...

    @abstractmethod
    def add_edge(self, source: int, target: int, cost: int) -> None: ...

    @abstractmethod
    def vertex(self, vertex_id: int) -> Optional[Vertex[_Data]]: ...

    @abstractmethod
    def vertices(self) -> Sequence[Vertex[_Data]]: ...

    @abstractmethod
    def num_vertices(self) -> int: ...

    @abstractmethod
    def all_edges(self) -> list[Edge]: ...