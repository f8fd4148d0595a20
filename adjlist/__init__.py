"""Adjacency-list graphs with a plain-text listing format."""

from adjlist.graph import Edge, Entry, Graph, GraphIOError

__all__ = ["Edge", "Entry", "Graph", "GraphIOError"]
