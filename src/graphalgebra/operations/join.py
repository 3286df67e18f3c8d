# src/graphalgebra/operations/join.py
"""Graph join, computed in place on the first graph."""

from __future__ import annotations

import structlog

from graphalgebra.contracts.errors import CorrespondenceError
from graphalgebra.core.graph import Graph, make_parallel_free_undirected
from graphalgebra.core.maps import NodeMap

slog = structlog.get_logger(__name__)


def join(g1: Graph, g2: Graph, mapping: NodeMap[int]) -> NodeMap[int]:
    """Join g2 into g1: union plus an edge from every old g1 node to every g2 node.

    Nodes of g2 that mapping identifies with a g1 node are merged into that
    node instead of being copied. No cross edge is added between a node and
    itself.

    The result is made parallel-free in the undirected sense as a last step.
    This removes duplicate cross edges, and it also collapses any parallel
    edges that g1 or g2 already contained before the call.

    Args:
        g1: First graph; receives the join.
        g2: Second graph; left unchanged.
        mapping: Map bound to g2. Set entries identify a g2 node with an
            existing g1 node.

    Returns:
        mapping, with every node of g2 now mapped to its node in g1

    Raises:
        CorrespondenceError: If mapping is not bound to g2 or identifies a
            node with something that is not a node of g1
    """
    if not mapping.valid or not mapping.is_bound_to(g2):
        raise CorrespondenceError("mapping must be bound to the second graph")
    for n2, n1 in mapping.items():
        if n1 is not None and not g1.has_node(n1):
            raise CorrespondenceError(f"Node {n2} is identified with {n1}, which is not in the first graph")

    g1_nodes = g1.nodes
    node_map, _ = g1.insert(g2)

    # Merge copies of identified nodes into the node they are identified with
    identified = 0
    for n2 in g2.nodes:
        n1_mapped = mapping[n2]
        if n1_mapped is None:
            continue
        n1_created = node_map[n2]
        for edge in g1.adj_edges(n1_created):
            source, target = g1.endpoints(edge)
            g1.new_edge(
                n1_mapped if source == n1_created else source,
                n1_mapped if target == n1_created else target,
            )
        g1.del_node(n1_created)
        node_map[n2] = n1_mapped
        identified += 1

    for n2 in g2.nodes:
        n2_in_g1 = node_map[n2]
        for n1 in g1_nodes:
            if n1 != n2_in_g1:
                g1.new_edge(n1, n2_in_g1)

    # Respecting parallel edges without creating new ones would need a check
    # per cross edge; collapsing afterwards is simpler
    removed = make_parallel_free_undirected(g1)

    mapping.update(node_map)

    slog.debug(
        "join_complete",
        identified=identified,
        parallel_removed=removed,
        node_count=g1.node_count,
        edge_count=g1.edge_count,
    )
    return mapping
