# src/graphalgebra/operations/complement.py
"""Graph complement, computed in place."""

from __future__ import annotations

import structlog

from graphalgebra.core.graph import EdgeID, Graph, NodeID

slog = structlog.get_logger(__name__)


def complement(g: Graph, *, directional: bool = False, allow_self_loops: bool = False) -> None:
    """Replace g by its complement.

    Every eligible node pair ends up with an edge exactly when it had none
    before. Undirected (the default), the eligible pairs are the unordered
    pairs {n1, n2}; an existing edge in either direction counts, and new
    edges run from the earlier node to the later one. Directional, the
    eligible pairs are the ordered pairs (n1, n2). Pairs (n, n) are eligible
    only with allow_self_loops; otherwise existing self-loops are left alone.

    Parallel edges collapse: a pair with several edges still counts as one
    existing adjacency and ends up with none.

    Args:
        g: Graph to complement in place.
        directional: Complement ordered instead of unordered pairs.
        allow_self_loops: Treat (n, n) as an eligible pair.
    """
    created: set[EdgeID] = set()
    removed = 0

    for n1 in g.nodes:
        neighbours: set[NodeID] = set()

        # Delete existing edges in scope, remembering whom they reached
        for adj in g.adj_entries(n1):
            n2 = adj.twin_node
            if directional and not adj.is_source:
                continue
            if not directional and n1 > n2:
                continue
            if not allow_self_loops and n1 == n2:
                continue
            if adj.edge in created or not g.has_edge(adj.edge):
                continue
            neighbours.add(n2)
            g.del_edge(adj.edge)
            removed += 1

        # Add edges to every in-scope node that was not a neighbour
        for n2 in g.nodes:
            if not directional and n1 > n2:
                continue
            if not allow_self_loops and n1 == n2:
                continue
            if n2 in neighbours:
                continue
            created.add(g.new_edge(n1, n2))

    slog.debug(
        "complement_complete",
        directional=directional,
        allow_self_loops=allow_self_loops,
        removed=removed,
        created=len(created),
    )
