# src/graphalgebra/operations/union.py
"""Graph union: disjoint and merging.

Both forms write into the first graph. The merging form lets the caller
identify nodes of the second graph with existing nodes of the first; those
nodes are not duplicated and their edges attach to the identified node.
"""

from __future__ import annotations

import structlog

from graphalgebra.contracts.errors import CorrespondenceError
from graphalgebra.core.graph import Graph, make_parallel_free, make_parallel_free_undirected
from graphalgebra.core.maps import NodeMap

slog = structlog.get_logger(__name__)


def disjoint_union(g1: Graph, g2: Graph) -> NodeMap[int]:
    """Insert a copy of g2 into g1.

    Returns:
        Map from every node of g2 to its copy in g1
    """
    node_map, _ = g1.insert(g2)
    map2to1: NodeMap[int] = NodeMap(g2)
    map2to1.update(node_map)
    return map2to1


def graph_union(
    g1: Graph,
    g2: Graph,
    map2to1: NodeMap[int] | None = None,
    *,
    parallel_free: bool = False,
    directed: bool = False,
) -> NodeMap[int]:
    """Form the union of g1 and g2 in g1, identifying nodes via map2to1.

    Args:
        g1: First graph; receives the union.
        g2: Second graph; left unchanged.
        map2to1: Map bound to g2. Entries already set identify a g2 node with
            an existing g1 node; unset entries get a fresh g1 node. Defaults
            to an all-unset map, which yields the disjoint union.
        parallel_free: Remove parallel edges from g1 afterwards. This also
            collapses parallel edges g1 or g2 already had.
        directed: Only with parallel_free; u -> v and v -> u are parallel
            unless this is set.

    Returns:
        map2to1, with every node of g2 now mapped to its node in g1

    Raises:
        CorrespondenceError: If map2to1 is not bound to g2, or identifies a
            node with something that is not a node of g1
    """
    if map2to1 is None:
        map2to1 = NodeMap(g2)
    elif not map2to1.is_bound_to(g2):
        raise CorrespondenceError("map2to1 must be bound to the second graph")

    identified = _check_identifications(g1, map2to1)

    for v2 in map2to1.unset_nodes():
        map2to1[v2] = g1.new_node()

    for edge in g2.edges:
        source, target = g2.endpoints(edge)
        g1.new_edge(map2to1[source], map2to1[target])  # type: ignore[arg-type]

    removed = 0
    if parallel_free:
        removed = make_parallel_free(g1) if directed else make_parallel_free_undirected(g1)

    slog.debug(
        "union_complete",
        identified=identified,
        parallel_removed=removed,
        node_count=g1.node_count,
        edge_count=g1.edge_count,
    )
    return map2to1


def _check_identifications(g1: Graph, map2to1: NodeMap[int]) -> int:
    """Verify every preset entry points into g1; return how many are set.

    Runs before g1 is touched so a bad map never leaves g1 half-merged.
    """
    identified = 0
    for v2, v1 in map2to1.items():
        if v1 is None:
            continue
        if not g1.has_node(v1):
            raise CorrespondenceError(f"Node {v2} is identified with {v1}, which is not in the first graph")
        identified += 1
    return identified
