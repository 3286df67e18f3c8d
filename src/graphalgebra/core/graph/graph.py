# src/graphalgebra/core/graph/graph.py
"""Graph class: a directed multigraph with stable handles.

Wraps a NetworkX MultiDiGraph. Nodes and edges are integer handles allocated
by the graph itself, so operations that create nodes (union, products, join)
never have to invent labels. Edge handles double as MultiDiGraph edge keys,
which keeps parallel edges distinguishable.
"""

from __future__ import annotations

import networkx as nx
from networkx import MultiDiGraph

from graphalgebra.contracts.errors import GraphError
from graphalgebra.core.graph.models import AdjEntry, EdgeID, NodeID


class Graph:
    """Directed multigraph with creation-ordered nodes and edges.

    Self-loops and parallel edges are allowed. Node handles define the total
    order used for tie-breaking: a node created later always has a larger
    handle than every node created before it.

    Accessors that return collections (nodes, edges, adj_entries) return
    list snapshots, so callers may mutate the graph while walking them.
    """

    def __init__(self) -> None:
        self._graph: MultiDiGraph[int] = nx.MultiDiGraph()
        self._edges: dict[EdgeID, tuple[NodeID, NodeID]] = {}
        self._next_node: NodeID = 0
        self._next_edge: EdgeID = 0

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return len(self._edges)

    @property
    def nodes(self) -> list[NodeID]:
        """All nodes in creation order."""
        return list(self._graph.nodes)

    @property
    def edges(self) -> list[EdgeID]:
        """All edges in creation order."""
        return list(self._edges)

    def has_node(self, node: NodeID) -> bool:
        """Check if node exists."""
        return self._graph.has_node(node)

    def has_edge(self, edge: EdgeID) -> bool:
        """Check if edge exists."""
        return edge in self._edges

    def first_node(self) -> NodeID | None:
        """Return the earliest node, or None for an empty graph."""
        return next(iter(self._graph.nodes), None)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def new_node(self) -> NodeID:
        """Create a node and return its handle."""
        node = self._next_node
        self._next_node += 1
        self._graph.add_node(node)
        return node

    def new_edge(self, source: NodeID, target: NodeID) -> EdgeID:
        """Create an edge source -> target and return its handle.

        Raises:
            GraphError: If either endpoint is not a node of this graph
        """
        self._require_node(source)
        self._require_node(target)
        edge = self._next_edge
        self._next_edge += 1
        self._graph.add_edge(source, target, key=edge)
        self._edges[edge] = (source, target)
        return edge

    def del_edge(self, edge: EdgeID) -> None:
        """Delete an edge.

        Raises:
            GraphError: If the edge does not exist
        """
        source, target = self.endpoints(edge)
        self._graph.remove_edge(source, target, key=edge)
        del self._edges[edge]

    def del_node(self, node: NodeID) -> None:
        """Delete a node together with all of its incident edges.

        Raises:
            GraphError: If the node does not exist
        """
        for edge in self.adj_edges(node):
            del self._edges[edge]
        self._graph.remove_node(node)

    def clear(self) -> None:
        """Remove all nodes and edges.

        Handle counters keep running, so handles from before the clear never
        alias nodes created afterwards.
        """
        self._graph.clear()
        self._edges.clear()

    def insert(self, other: Graph) -> tuple[dict[NodeID, NodeID], dict[EdgeID, EdgeID]]:
        """Copy all nodes and edges of another graph into this one.

        Nodes and edges are created in the other graph's creation order.

        Returns:
            (node_map, edge_map) from handles of other to the new handles here
        """
        node_map = {node: self.new_node() for node in other.nodes}
        edge_map = {}
        for edge in other.edges:
            source, target = other.endpoints(edge)
            edge_map[edge] = self.new_edge(node_map[source], node_map[target])
        return node_map, edge_map

    def copy(self) -> Graph:
        """Return an independent copy with identical handles."""
        duplicate = Graph()
        duplicate._graph = self._graph.copy()
        duplicate._edges = dict(self._edges)
        duplicate._next_node = self._next_node
        duplicate._next_edge = self._next_edge
        return duplicate

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def endpoints(self, edge: EdgeID) -> tuple[NodeID, NodeID]:
        """Return (source, target) of an edge.

        Raises:
            GraphError: If the edge does not exist
        """
        try:
            return self._edges[edge]
        except KeyError:
            raise GraphError(f"Edge {edge} is not in the graph") from None

    def source(self, edge: EdgeID) -> NodeID:
        return self.endpoints(edge)[0]

    def target(self, edge: EdgeID) -> NodeID:
        return self.endpoints(edge)[1]

    def opposite(self, edge: EdgeID, node: NodeID) -> NodeID:
        """Return the endpoint of edge that is not node (node itself for a self-loop)."""
        source, target = self.endpoints(edge)
        if node == source:
            return target
        if node == target:
            return source
        raise GraphError(f"Node {node} is not an endpoint of edge {edge}")

    def adj_entries(self, node: NodeID) -> list[AdjEntry]:
        """Return every incidence at node, ordered by edge creation.

        Incoming and outgoing edges are interleaved as in an undirected
        incidence list. A self-loop yields its source entry, then its target
        entry.

        Raises:
            GraphError: If the node does not exist
        """
        entries = []
        for edge in self.adj_edges(node):
            source, target = self._edges[edge]
            if source == node:
                entries.append(AdjEntry(edge=edge, node=node, twin_node=target, is_source=True))
            if target == node:
                entries.append(AdjEntry(edge=edge, node=node, twin_node=source, is_source=False))
        return entries

    def adj_edges(self, node: NodeID) -> list[EdgeID]:
        """Return the edges incident to node, each once, in creation order.

        Raises:
            GraphError: If the node does not exist
        """
        self._require_node(node)
        incident = {key for _, _, key in self._graph.out_edges(node, keys=True)}
        incident.update(key for _, _, key in self._graph.in_edges(node, keys=True))
        return sorted(incident)

    def neighbours(self, node: NodeID) -> set[NodeID]:
        """Return all nodes adjacent to node, regardless of edge direction."""
        self._require_node(node)
        return set(self._graph.successors(node)) | set(self._graph.predecessors(node))

    def degree(self, node: NodeID) -> int:
        """Number of incidences at node (a self-loop counts twice)."""
        self._require_node(node)
        return self._graph.degree(node)  # type: ignore[no-any-return]

    def succ(self, node: NodeID) -> list[NodeID]:
        """Return the nodes strictly after node in the total order."""
        self._require_node(node)
        return [other for other in self._graph.nodes if other > node]

    def search_edge(self, u: NodeID, v: NodeID, *, directed: bool = False) -> EdgeID | None:
        """Return the earliest edge u -> v (or v -> u unless directed), else None."""
        self._require_node(u)
        self._require_node(v)
        candidates = list(self._graph.get_edge_data(u, v, default={}))
        if not directed:
            candidates.extend(self._graph.get_edge_data(v, u, default={}))
        return min(candidates, default=None)

    def to_networkx(self) -> MultiDiGraph[int]:
        """Return a frozen copy of the underlying NetworkX graph.

        Edge keys are the edge handles of this graph. Mutation attempts on
        the copy raise nx.NetworkXError.
        """
        return nx.freeze(self._graph.copy())  # type: ignore[no-any-return]

    def _require_node(self, node: NodeID) -> None:
        if not self._graph.has_node(node):
            raise GraphError(f"Node {node} is not in the graph")
