# src/graphalgebra/core/graph/models.py
"""Types used by the graph container.

Leaf module: no intra-package imports (prevents import cycles).
"""

from __future__ import annotations

from dataclasses import dataclass

# Node and edge handles are plain integers allocated by the owning Graph.
# Handles increase monotonically and are never reused, so comparing two
# handles of the same graph compares creation order.
type NodeID = int
type EdgeID = int


@dataclass(frozen=True, slots=True)
class AdjEntry:
    """One incidence of an edge at a node.

    Every edge has two adjacency entries: one at its source (is_source=True)
    and one at its target (is_source=False). A self-loop therefore shows up
    twice at the same node, once per role.
    """

    edge: EdgeID
    node: NodeID
    twin_node: NodeID
    is_source: bool
