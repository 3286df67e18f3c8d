# src/graphalgebra/core/maps.py
"""Node correspondence maps.

A correspondence map records, for a node of one graph, the node that
represents it in another graph. Operations read and fill these maps instead
of recomputing which new node stands for which old one.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping

from graphalgebra.contracts.errors import CorrespondenceError
from graphalgebra.core.graph import Graph, NodeID


class NodeMap[T](MutableMapping[NodeID, T | None]):
    """Mapping from the nodes of one graph to values, defaulting to None.

    The map is bound to a graph: every node of that graph is a key, present
    from the moment the node exists, and reads as None ("unset") until a
    value is assigned. Keys that are not nodes of the bound graph raise
    KeyError.

    A map constructed without a graph is invalid and must be bound with
    init() before use.
    """

    def __init__(self, graph: Graph | None = None) -> None:
        self._graph = graph
        self._values: dict[NodeID, T] = {}

    def __repr__(self) -> str:
        return f"NodeMap({dict(self.items())!r})"

    @property
    def valid(self) -> bool:
        """True if the map is bound to a graph."""
        return self._graph is not None

    @property
    def graph(self) -> Graph:
        """The bound graph.

        Raises:
            CorrespondenceError: If the map is not bound
        """
        if self._graph is None:
            raise CorrespondenceError("NodeMap is not bound to a graph")
        return self._graph

    def is_bound_to(self, graph: Graph) -> bool:
        return self._graph is graph

    def init(self, graph: Graph) -> None:
        """Rebind to graph and reset every entry to unset."""
        self._graph = graph
        self._values.clear()

    def unset_nodes(self) -> list[NodeID]:
        """Nodes of the bound graph that have no value, in creation order."""
        return [node for node in self.graph.nodes if self._values.get(node) is None]

    def _check_key(self, node: NodeID) -> None:
        if not self.graph.has_node(node):
            raise KeyError(node)

    def __getitem__(self, node: NodeID) -> T | None:
        self._check_key(node)
        return self._values.get(node)

    def __setitem__(self, node: NodeID, value: T | None) -> None:
        self._check_key(node)
        if value is None:
            self._values.pop(node, None)
        else:
            self._values[node] = value

    def __delitem__(self, node: NodeID) -> None:
        # Deleting an entry unsets it; the key stays as long as the node exists
        self._check_key(node)
        self._values.pop(node, None)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.graph.nodes)

    def __len__(self) -> int:
        return self.graph.node_count


class ProductNodeMap(Mapping[tuple[NodeID, NodeID], NodeID]):
    """Total mapping from node pairs (v1, v2) of two graphs to product nodes.

    Filled exclusively by the product kernel. After a product operation
    every pair in V1 x V2 resolves to exactly one product node.
    """

    def __init__(self) -> None:
        self._pairs: dict[tuple[NodeID, NodeID], NodeID] = {}
        self._rows: dict[NodeID, dict[NodeID, NodeID]] = {}

    def __repr__(self) -> str:
        return f"ProductNodeMap({len(self._pairs)} pairs)"

    def clear(self) -> None:
        self._pairs.clear()
        self._rows.clear()

    def assign(self, v1: NodeID, v2: NodeID, node: NodeID) -> None:
        """Record the product node representing (v1, v2)."""
        self._pairs[(v1, v2)] = node
        self._rows.setdefault(v1, {})[v2] = node

    def row(self, v1: NodeID) -> dict[NodeID, NodeID]:
        """Return {v2: product node} for a fixed node v1 of the first graph."""
        return dict(self._rows[v1])

    def __getitem__(self, pair: tuple[NodeID, NodeID]) -> NodeID:
        return self._pairs[pair]

    def __iter__(self) -> Iterator[tuple[NodeID, NodeID]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)
