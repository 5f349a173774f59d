import random

import pytest

from kruskal_variants.filter_kruskal import FilterKruskal
from kruskal_variants.graph_matrix import GraphMatrix
from kruskal_variants.graph_stars import GraphStars
from kruskal_variants.kruskal import Kruskal
from kruskal_variants.qs_kruskal import QuickSortKruskal
from kruskal_variants.skewed_filter_kruskal import SkewedFilterKruskal
from kruskal_variants.sqsk import StarQuickSortKruskal
from kruskal_variants.union_find import UnionFind

SEED = 0
SEEDED_VARIANTS = [QuickSortKruskal, FilterKruskal, SkewedFilterKruskal]


def _edge_set(edges):
    return sorted((min(e.source, e.target), max(e.source, e.target), e.weight) for e in edges)


def _acyclic(n, edges):
    forest = UnionFind(n)
    return all(forest.union(e.source, e.target) for e in edges)


def _both_layouts(n, p, low, high, seed):
    """The same random graph built as stars and as a matrix."""
    return tuple(
        layout.random(range(n), p, low, high, True, random.Random(seed))
        for layout in (GraphStars, GraphMatrix)
    )


@pytest.mark.parametrize("v,e", [(100, 500), (500, 2_000), (1_000, 5_000)])
def test_all_variants_agree_on_benchmark_graphs(v, e):
    max_possible = v * (v - 1) // 2
    stars, matrix = _both_layouts(v, min(e, max_possible) / max_possible, 1, 1000, 42)
    assert _edge_set(stars.all_edges()) == _edge_set(matrix.all_edges())

    star_edges, star_cost = StarQuickSortKruskal(stars).run()
    costs = {Kruskal(matrix).run()[1], star_cost}
    costs.update(variant(matrix).run(random.Random(SEED))[1] for variant in SEEDED_VARIANTS)
    assert costs == {star_cost}
    assert _acyclic(v, star_edges)
    assert star_cost == sum(x.weight for x in star_edges)


@pytest.mark.parametrize(
    "n,links,expected,total",
    [
        (3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)], [(0, 1, 1), (1, 2, 2)], 3),
        (0, [], [], 0),
        (5, [], [], 0),
    ],
    ids=["triangle", "empty", "isolated"],
)
def test_small_graphs(n, links, expected, total):
    graph = GraphStars.from_collection(range(n))
    for link in links:
        graph.add_edge(*link)
    edges, cost = StarQuickSortKruskal(graph).run()
    assert (_edge_set(edges), cost) == (expected, total)


def test_disconnected_forest_edges_belong_to_graph():
    stars, matrix = _both_layouts(40, 0.04, 1, 50, 17)
    edges, cost = StarQuickSortKruskal(stars).run()
    assert set(_edge_set(edges)) <= set(_edge_set(stars.all_edges()))
    assert _acyclic(40, edges)
    expected_edges, expected_cost = Kruskal(matrix).run()
    assert (cost, len(edges)) == (expected_cost, len(expected_edges))


def test_mst_edges_start_at_owning_vertex():
    graph = GraphStars.random(range(30), 0.3, 1, 100, True, random.Random(2))
    edges, _ = StarQuickSortKruskal(graph).run()
    stars = graph.stars()
    for edge in edges:
        assert (edge.target, edge.weight) in {(e.target, e.weight) for e in stars[edge.source]}