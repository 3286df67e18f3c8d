# src/graphalgebra/core/graph/__init__.py
"""Directed multigraph container and simple-graph helpers."""

from graphalgebra.core.graph.graph import Graph
from graphalgebra.core.graph.models import AdjEntry, EdgeID, NodeID
from graphalgebra.core.graph.simple import (
    connected_components,
    has_self_loops,
    is_parallel_free,
    is_parallel_free_undirected,
    is_simple,
    make_parallel_free,
    make_parallel_free_undirected,
    num_parallel_edges,
    num_parallel_edges_undirected,
)

__all__ = [
    "AdjEntry",
    "EdgeID",
    "Graph",
    "NodeID",
    "connected_components",
    "has_self_loops",
    "is_parallel_free",
    "is_parallel_free_undirected",
    "is_simple",
    "make_parallel_free",
    "make_parallel_free_undirected",
    "num_parallel_edges",
    "num_parallel_edges_undirected",
]
