"""Fenwick trees, segment trees, graph cut algorithms and a query command line."""

__version__ = "0.1.0"
__all__ = ["cli", "fenwick", "graph", "lazy", "order_trees", "segment_tree"]