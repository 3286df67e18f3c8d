# src/graphalgebra/core/graph/simple.py
"""Simple-graph helpers: parallel edges, self-loops, connected components.

An edge is parallel when an earlier edge (lower handle) connects the same
ordered pair of nodes (directed) or the same unordered pair (undirected).
Removal always keeps the earliest edge of each bundle.
"""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx

from graphalgebra.core.graph.graph import Graph
from graphalgebra.core.graph.models import EdgeID, NodeID


def _pair_key(source: NodeID, target: NodeID, directed: bool) -> tuple[NodeID, NodeID]:
    if directed or source <= target:
        return (source, target)
    return (target, source)


def _parallel_edges(graph: Graph, *, directed: bool) -> Iterator[EdgeID]:
    seen: set[tuple[NodeID, NodeID]] = set()
    for edge in graph.edges:
        key = _pair_key(*graph.endpoints(edge), directed)
        if key in seen:
            yield edge
        else:
            seen.add(key)


def num_parallel_edges(graph: Graph) -> int:
    """Count edges that repeat an earlier edge's (source, target) pair."""
    return sum(1 for _ in _parallel_edges(graph, directed=True))


def num_parallel_edges_undirected(graph: Graph) -> int:
    """Count edges that repeat an earlier edge's unordered endpoint pair."""
    return sum(1 for _ in _parallel_edges(graph, directed=False))


def is_parallel_free(graph: Graph) -> bool:
    return next(_parallel_edges(graph, directed=True), None) is None


def is_parallel_free_undirected(graph: Graph) -> bool:
    return next(_parallel_edges(graph, directed=False), None) is None


def make_parallel_free(graph: Graph) -> int:
    """Delete directed parallel edges, keeping the earliest of each bundle.

    Returns:
        Number of edges deleted
    """
    doomed = list(_parallel_edges(graph, directed=True))
    for edge in doomed:
        graph.del_edge(edge)
    return len(doomed)


def make_parallel_free_undirected(graph: Graph) -> int:
    """Delete undirected parallel edges, keeping the earliest of each bundle.

    u -> v and v -> u count as parallel here.

    Returns:
        Number of edges deleted
    """
    doomed = list(_parallel_edges(graph, directed=False))
    for edge in doomed:
        graph.del_edge(edge)
    return len(doomed)


def has_self_loops(graph: Graph) -> bool:
    return any(source == target for source, target in map(graph.endpoints, graph.edges))


def is_simple(graph: Graph) -> bool:
    """True if the graph has no self-loops and no undirected parallel edges."""
    return not has_self_loops(graph) and is_parallel_free_undirected(graph)


def connected_components(graph: Graph) -> int:
    """Count connected components, ignoring edge direction."""
    return nx.number_weakly_connected_components(graph.to_networkx())
