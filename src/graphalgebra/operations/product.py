# src/graphalgebra/operations/product.py
"""Graph products.

Every product shares one kernel: clear the destination, create one node per
pair (v1, v2) in V1 x V2, then call an edge rule once per pair. The variants
below differ only in their edge rule.

Both loops run v1 outer, v2 inner, in creation order. That order decides
the handles of the product nodes and the order edges are created in, so it
is kept stable for reproducible output.

Edge rules walk undirected incidence lists. To emit each edge of an input
graph once rather than twice, a rule only follows incidences where the
current node is the edge's source ("source-role neighbours").
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from graphalgebra.contracts.enums import ProductKind
from graphalgebra.contracts.errors import ConfigurationError, GraphError
from graphalgebra.core.graph import Graph, NodeID
from graphalgebra.core.maps import ProductNodeMap

slog = structlog.get_logger(__name__)

type EdgeRule = Callable[[NodeID, NodeID], None]


def graph_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap,
    add_edges: EdgeRule,
) -> None:
    """Build the node grid of g1 x g2 in product and apply an edge rule.

    Args:
        g1: First input graph.
        g2: Second input graph.
        product: Cleared, then assigned the product.
        node_in_product: Cleared, then assigned the map (v1, v2) -> product node.
        add_edges: Called once per pair (v1, v2) after all product nodes exist.
    """
    product.clear()
    node_in_product.clear()

    nodes1 = g1.nodes
    nodes2 = g2.nodes

    for v1 in nodes1:
        for v2 in nodes2:
            node_in_product.assign(v1, v2, product.new_node())

    for v1 in nodes1:
        for v2 in nodes2:
            add_edges(v1, v2)

    slog.debug(
        "product_complete",
        node_count=product.node_count,
        edge_count=product.edge_count,
    )


def _source_neighbours(graph: Graph, node: NodeID) -> list[NodeID]:
    """Targets of the edges leaving node, one entry per edge."""
    return [adj.twin_node for adj in graph.adj_entries(node) if adj.is_source]


def _all_neighbours(graph: Graph, node: NodeID) -> list[NodeID]:
    """Twin nodes of every incidence at node, one entry per incidence."""
    return [adj.twin_node for adj in graph.adj_entries(node)]


def _add_g2_edges(g2: Graph, product: Graph, nip: ProductNodeMap, v1: NodeID, v2: NodeID) -> None:
    # G2-edges between copies of G1
    src = nip[v1, v2]
    for w2 in _source_neighbours(g2, v2):
        product.new_edge(src, nip[v1, w2])


def _add_g1_edges(g1: Graph, product: Graph, nip: ProductNodeMap, v1: NodeID, v2: NodeID) -> None:
    # G1-edges between copies of G2
    src = nip[v1, v2]
    for w1 in _source_neighbours(g1, v1):
        product.new_edge(src, nip[w1, v2])


def _add_adjacent_pair_edges(
    g1: Graph, g2: Graph, product: Graph, nip: ProductNodeMap, v1: NodeID, v2: NodeID
) -> None:
    # Edges between adjacent node pairs. All incidences of v1 are followed,
    # only source-role incidences of v2, so every edge pair yields two edges.
    src = nip[v1, v2]
    targets2 = _source_neighbours(g2, v2)
    for w1 in _all_neighbours(g1, v1):
        for w2 in targets2:
            product.new_edge(src, nip[w1, w2])


def _add_g1_edges_to_all(g1: Graph, g2: Graph, product: Graph, nip: ProductNodeMap, v1: NodeID, v2: NodeID) -> None:
    # G1-edges between copies of G2, linking all pairs of G2-nodes
    src = nip[v1, v2]
    targets1 = _source_neighbours(g1, v1)
    for w2 in g2.nodes:
        for w1 in targets1:
            product.new_edge(src, nip[w1, w2])


def cartesian_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Cartesian product: (v1, w1) ~ (v1, w2) for w1w2 in E2, (v1, w) ~ (v2, w) for v1v2 in E1.

    Parallel edges of the inputs are carried into the product.

    Returns:
        The map (v1, v2) -> product node
    """
    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        _add_g2_edges(g2, product, nip, v1, v2)
        _add_g1_edges(g1, product, nip, v1, v2)

    graph_product(g1, g2, product, nip, add_edges)
    return nip


def tensor_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Tensor product: (v1, w1) ~ (v2, w2) for v1v2 in E1 and w1w2 in E2.

    Each pair of input edges contributes two product edges.
    """
    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        _add_adjacent_pair_edges(g1, g2, product, nip, v1, v2)

    graph_product(g1, g2, product, nip, add_edges)
    return nip


def lexicographical_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Lexicographical product: (v1, w1) ~ (v2, w2) for v1v2 in E1, (v, w1) ~ (v, w2) for w1w2 in E2.

    Not commutative: swapping g1 and g2 gives a different graph.
    """
    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        _add_g1_edges_to_all(g1, g2, product, nip, v1, v2)
        _add_g2_edges(g2, product, nip, v1, v2)

    graph_product(g1, g2, product, nip, add_edges)
    return nip


def strong_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Strong product: union of the Cartesian and tensor edge sets."""
    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        _add_g2_edges(g2, product, nip, v1, v2)
        _add_g1_edges(g1, product, nip, v1, v2)
        _add_adjacent_pair_edges(g1, g2, product, nip, v1, v2)

    graph_product(g1, g2, product, nip, add_edges)
    return nip


def co_normal_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Co-normal product: (v1, w1) ~ (v2, w2) for v1v2 in E1 or w1w2 in E2."""
    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        _add_g1_edges_to_all(g1, g2, product, nip, v1, v2)

        # G2-edges between copies of G1, linking all pairs of G1-nodes
        src = nip[v1, v2]
        targets2 = _source_neighbours(g2, v2)
        for w1 in g1.nodes:
            for w2 in targets2:
                product.new_edge(src, nip[w1, w2])

    graph_product(g1, g2, product, nip, add_edges)
    return nip


def modular_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Modular product: tensor edges plus (v1, w1) ~ (v2, w2) for v1v2 not in E1 and w1w2 not in E2.

    Only defined for simple input graphs. On multigraphs the result is a
    valid graph but not the modular product; this is not checked.
    """
    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        src = nip[v1, v2]
        _add_adjacent_pair_edges(g1, g2, product, nip, v1, v2)

        adjacent_to_v1 = g1.neighbours(v1)
        adjacent_to_v2 = g2.neighbours(v2)

        # Only pair with nodes after v2 so no edge is inserted twice
        later2 = [n2 for n2 in g2.succ(v2) if n2 not in adjacent_to_v2]
        for n1 in g1.nodes:
            if n1 == v1 or n1 in adjacent_to_v1:
                continue
            for n2 in later2:
                product.new_edge(src, nip[n1, n2])

    graph_product(g1, g2, product, nip, add_edges)
    return nip


def rooted_product(
    g1: Graph,
    g2: Graph,
    product: Graph,
    root: NodeID,
    node_in_product: ProductNodeMap | None = None,
) -> ProductNodeMap:
    """Rooted product: one copy of g2 per node of g1, joined along g1's edges at the root copies.

    Args:
        root: Node of g2 identified with every node of g1 once.

    Raises:
        GraphError: If root is not a node of g2
    """
    if not g2.has_node(root):
        raise GraphError(f"Root {root} is not a node of the second graph")

    nip = node_in_product if node_in_product is not None else ProductNodeMap()

    def add_edges(v1: NodeID, v2: NodeID) -> None:
        _add_g2_edges(g2, product, nip, v1, v2)
        if v2 == root:
            _add_g1_edges(g1, product, nip, v1, v2)

    graph_product(g1, g2, product, nip, add_edges)
    return nip


_PRODUCTS: dict[ProductKind, Callable[[Graph, Graph, Graph, ProductNodeMap | None], ProductNodeMap]] = {
    ProductKind.CARTESIAN: cartesian_product,
    ProductKind.TENSOR: tensor_product,
    ProductKind.LEXICOGRAPHICAL: lexicographical_product,
    ProductKind.STRONG: strong_product,
    ProductKind.CO_NORMAL: co_normal_product,
    ProductKind.MODULAR: modular_product,
}


def product(
    kind: ProductKind,
    g1: Graph,
    g2: Graph,
    dest: Graph,
    node_in_product: ProductNodeMap | None = None,
    *,
    root: NodeID | None = None,
) -> ProductNodeMap:
    """Compute the product of the given kind into dest.

    Raises:
        ConfigurationError: If kind is ROOTED and no root is given, or a root
            is given for any other kind
    """
    try:
        kind = ProductKind(kind)
    except ValueError:
        raise ConfigurationError(f"Unknown product kind: {kind!r}") from None

    if kind is ProductKind.ROOTED:
        if root is None:
            raise ConfigurationError("Rooted product requires a root node of the second graph")
        return rooted_product(g1, g2, dest, root, node_in_product)
    if root is not None:
        raise ConfigurationError(f"{kind} product does not take a root")
    return _PRODUCTS[kind](g1, g2, dest, node_in_product)
