# tests/operations/test_algebra.py
"""Tests for the GraphAlgebra facade."""

from pathlib import Path

from graphalgebra import GraphAlgebra, ProductKind
from graphalgebra.core.config import ComplementSettings, GraphAlgebraSettings, UnionSettings
from graphalgebra.core.graph import Graph
from graphalgebra.core.maps import NodeMap


def _edge_pair() -> tuple[Graph, Graph, NodeMap[int]]:
    """g1 = a -> b, g2 = y -> x with x identified to a and y to b."""
    g1 = Graph()
    a, b = g1.new_node(), g1.new_node()
    g1.new_edge(a, b)
    g2 = Graph()
    x, y = g2.new_node(), g2.new_node()
    g2.new_edge(y, x)
    map2to1: NodeMap[int] = NodeMap(g2)
    map2to1[x] = a
    map2to1[y] = b
    return g1, g2, map2to1


class TestGraphAlgebraDefaults:
    def test_default_union_keeps_parallel_edges(self) -> None:
        g1, g2, map2to1 = _edge_pair()

        GraphAlgebra().union(g1, g2, map2to1)

        assert g1.edge_count == 2

    def test_configured_union_is_parallel_free(self) -> None:
        g1, g2, map2to1 = _edge_pair()
        algebra = GraphAlgebra(GraphAlgebraSettings(union=UnionSettings(parallel_free=True)))

        algebra.union(g1, g2, map2to1)

        assert g1.edge_count == 1

    def test_explicit_argument_overrides_settings(self) -> None:
        g1, g2, map2to1 = _edge_pair()
        algebra = GraphAlgebra(GraphAlgebraSettings(union=UnionSettings(parallel_free=True)))

        algebra.union(g1, g2, map2to1, directed=True)

        # b -> a is not parallel to a -> b when direction matters
        assert g1.edge_count == 2

    def test_configured_complement(self) -> None:
        graph = Graph()
        graph.new_node()
        graph.new_node()
        algebra = GraphAlgebra(GraphAlgebraSettings(complement=ComplementSettings(directional=True)))

        algebra.complement(graph)
        assert graph.edge_count == 2

        algebra.complement(graph, directional=False)
        # Both directed edges count as one adjacency and are removed
        assert graph.edge_count == 0

    def test_product_intersection_and_join(self) -> None:
        algebra = GraphAlgebra()
        g1 = Graph()
        a, b = g1.new_node(), g1.new_node()
        g1.new_edge(a, b)
        dest = Graph()

        nip = algebra.product(ProductKind.STRONG, g1, g1, dest)
        assert dest.node_count == 4
        assert dest.edge_count == 1 * 2 + 1 * 2 + 2

        node_map: NodeMap[int] = NodeMap(dest)
        node_map[nip[a, a]] = a
        node_map[nip[b, b]] = b
        algebra.intersection(dest, g1, node_map)
        assert dest.node_count == 2
        assert dest.edge_count == 1

        mapping: NodeMap[int] = NodeMap(g1)
        g3 = Graph()
        g3.new_node()
        algebra.join(g3, g1, mapping)
        assert g3.node_count == 3
        assert g3.edge_count == 3


class TestGraphAlgebraFromConfig:
    def test_from_config_applies_settings(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("union:\n  parallel_free: true\nlogging:\n  level: WARNING\n")

        algebra = GraphAlgebra.from_config(config_file)

        assert algebra.settings.union.parallel_free is True
        assert algebra.settings.logging.level == "WARNING"

        g1, g2, map2to1 = _edge_pair()
        algebra.union(g1, g2, map2to1)
        assert g1.edge_count == 1
