"""Minimum spanning trees with several Kruskal variants over matrix and adjacency-list graphs."""

__version__ = "0.1.0"