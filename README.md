# kruskal-variants

Minimum spanning trees computed with several variants of Kruskal's
algorithm. The package has two undirected graph representations: a
compressed triangular adjacency matrix (`GraphMatrix`) and per-vertex
adjacency lists, or "stars" (`GraphStars`). It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

Both representations live in their own modules:
`kruskal_variants.graph_matrix.GraphMatrix` and
`kruskal_variants.graph_stars.GraphStars`. Both implement the `Graph`
interface from `kruskal_variants.graph`:

- `add_vertex(data)` returns the new vertex id. Ids count up from 0.
- `add_edge(source, target, cost)` adds an undirected edge.
- `vertex(vertex_id)` returns a `Vertex` (with `id` and `data`), or `None`
  if the id is unknown.
- `vertices()` returns the vertices in id order.
- `num_vertices()` returns the number of vertices.
- `all_edges()` returns every edge once, as `Edge(source, target, weight)`.

Edges compare and sort by `weight` only.

`from_collection(collection)` builds an edgeless graph with one vertex
per item. `random(collection, p, min_cost, max_cost, no_self_loops=True,
rng=None)` builds an Erdős–Rényi G(n, p) graph. Each edge gets a uniform
integer cost in `[min_cost, max_cost]`, drawn from `rng` (a
`random.Random`).

Where the two representations differ:

- `GraphMatrix` keeps a cost for self-loops. Adding an edge again
  replaces the cost in `adj_matrix()`, but `all_edges()` keeps the edge
  as it was first added. `adj_matrix()` returns a copy of the flattened
  matrix, with `MAX_COST` (from `kruskal_variants.graph`) marking absent
  edges.
- `GraphStars` ignores self-loops and repeated edges. `stars()` returns a
  copy of each vertex's adjacency list.

`random` raises `InvalidProbabilityError` when `p` is outside
`[0.0, 1.0]`. It raises `InvalidCostRangeError` when
`min_cost > max_cost`. Both are subclasses of `GraphError`, itself a
`ValueError`, in `kruskal_variants.errors`.

## Algorithms

| Class (module)                         | Strategy                                              |
|----------------------------------------|-------------------------------------------------------|
| `Kruskal` (`kruskal`)                  | binary heap of all edges                              |
| `QuickSortKruskal` (`qs_kruskal`)      | lazy quicksort with a random pivot                    |
| `FilterKruskal` (`filter_kruskal`)     | quicksort that drops edges inside one component       |
| `SkewedFilterKruskal` (`skewed_filter_kruskal`) | lightest of a few random pivot samples       |
| `StarQuickSortKruskal` (`sqsk`)        | quickselect on each vertex's star, plus a heap        |

The first four take any graph. `StarQuickSortKruskal` needs a
`GraphStars`. The quicksort variants take an optional `rng` in
`run(rng=None)`; without one they use a fresh `random.Random()`.

Each `run` returns a pair: the list of tree edges and their total cost.
If the graph is disconnected, the result is a minimum spanning forest.
The disjoint-set structure the algorithms share is
`kruskal_variants.union_find.UnionFind`, with `find(i)` and `union(i, j)`.

## Usage

```python
import random

from kruskal_variants.graph_matrix import GraphMatrix
from kruskal_variants.graph_stars import GraphStars
from kruskal_variants.kruskal import Kruskal
from kruskal_variants.filter_kruskal import FilterKruskal
from kruskal_variants.sqsk import StarQuickSortKruskal

rng = random.Random(42)
matrix = GraphMatrix.random(range(10), 0.5, 1, 100, True, rng)

edges, cost = Kruskal(matrix).run()
edges2, cost2 = FilterKruskal(matrix).run(random.Random(0))
assert cost == cost2

stars = GraphStars.from_collection(range(4))
stars.add_edge(0, 1, 3)
stars.add_edge(1, 2, 1)
stars.add_edge(2, 3, 2)
stars.add_edge(0, 3, 9)
edges, cost = StarQuickSortKruskal(stars).run()
print(cost)  # 6
```

## Command line

```
kruskal-variants [--vertices N] [--probability P] [--min-cost A] [--max-cost B] [--seed S]
```

The command builds a random `GraphMatrix` without self-loops. By default
it has 10 vertices, probability 0.5 and costs from 1 to 100. It then runs
`Kruskal` and prints the total cost, the number of edges and every edge in
the tree. An invalid probability or cost range is reported on standard
error, with exit status 1.

## Limitations

Graphs are built in memory only. The package does not read or write graph
files, and the command works only on random graphs.