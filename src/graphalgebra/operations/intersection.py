# src/graphalgebra/operations/intersection.py
"""Graph intersection, computed in place on the first graph."""

from __future__ import annotations

import structlog

from graphalgebra.contracts.errors import CorrespondenceError
from graphalgebra.core.graph import Graph
from graphalgebra.core.maps import NodeMap

slog = structlog.get_logger(__name__)


def intersection(g1: Graph, g2: Graph, node_map: NodeMap[int]) -> None:
    """Reduce g1 to its intersection with g2.

    A node of g1 survives if node_map gives it a correspondent in g2. An
    edge of g1 survives if the correspondents of its endpoints are adjacent
    in g2, in either direction. Edge direction and multiplicity in g1 are
    otherwise kept as they are.

    Args:
        g1: First graph; reduced in place.
        g2: Second graph; left unchanged.
        node_map: Map bound to g1 giving each node its g2 correspondent,
            or None.

    Raises:
        CorrespondenceError: If node_map is not bound to g1 or maps a node to
            something that is not a node of g2
    """
    if not node_map.valid or not node_map.is_bound_to(g1):
        raise CorrespondenceError("node_map must be bound to the first graph")
    for n1, n2 in node_map.items():
        if n2 is not None and not g2.has_node(n2):
            raise CorrespondenceError(f"Node {n1} maps to {n2}, which is not in the second graph")

    dropped_nodes = 0
    for n1 in node_map.unset_nodes():
        g1.del_node(n1)
        dropped_nodes += 1

    dropped_edges = 0
    for n1a in g1.nodes:
        n2a = node_map[n1a]
        n2a_neighbours = g2.neighbours(n2a)  # type: ignore[arg-type]

        for edge in g1.adj_edges(n1a):
            n2b = node_map[g1.opposite(edge, n1a)]
            if n2b not in n2a_neighbours:
                g1.del_edge(edge)
                dropped_edges += 1

    slog.debug(
        "intersection_complete",
        dropped_nodes=dropped_nodes,
        dropped_edges=dropped_edges,
        node_count=g1.node_count,
        edge_count=g1.edge_count,
    )
