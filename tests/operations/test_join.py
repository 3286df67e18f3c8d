# tests/operations/test_join.py
"""Tests for graph join."""

import pytest

from graphalgebra.contracts.errors import CorrespondenceError
from graphalgebra.core.graph import Graph, is_parallel_free_undirected
from graphalgebra.core.maps import NodeMap
from graphalgebra.operations import join
from tests.helpers.graph_assertions import undirected_pairs


@pytest.fixture
def two_pairs() -> tuple[Graph, list[int], Graph, list[int]]:
    """g1 = {a, b}, g2 = {c, d}, no edges."""
    g1 = Graph()
    a, b = g1.new_node(), g1.new_node()
    g2 = Graph()
    c, d = g2.new_node(), g2.new_node()
    return g1, [a, b], g2, [c, d]


def _pairs(*pairs: tuple[int, int]) -> list[tuple[int, int]]:
    return sorted((min(u, v), max(u, v)) for u, v in pairs)


class TestJoin:
    def test_edgeless_graphs_without_identification(self, two_pairs: tuple[Graph, list[int], Graph, list[int]]) -> None:
        g1, (a, b), g2, (c, d) = two_pairs

        mapping = join(g1, g2, NodeMap(g2))

        c1, d1 = mapping[c], mapping[d]
        assert g1.node_count == 4
        assert undirected_pairs(g1) == _pairs((a, c1), (a, d1), (b, c1), (b, d1))

    def test_edgeless_graphs_with_identified_node(self, two_pairs: tuple[Graph, list[int], Graph, list[int]]) -> None:
        g1, (a, b), g2, (c, d) = two_pairs
        mapping: NodeMap[int] = NodeMap(g2)
        mapping[c] = a

        join(g1, g2, mapping)

        d1 = mapping[d]
        assert mapping[c] == a
        assert g1.node_count == 3
        # c is a: a-d, b-a, b-d; no a-a loop
        assert undirected_pairs(g1) == _pairs((a, d1), (a, b), (b, d1))

    def test_graphs_with_edges_without_identification(
        self, two_pairs: tuple[Graph, list[int], Graph, list[int]]
    ) -> None:
        g1, (a, b), g2, (c, d) = two_pairs
        g1.new_edge(a, b)
        g2.new_edge(c, d)

        join(g1, g2, NodeMap(g2))

        assert g1.node_count == 4
        assert g1.edge_count == 6

    def test_graphs_with_edges_and_identified_node(self, two_pairs: tuple[Graph, list[int], Graph, list[int]]) -> None:
        g1, (a, b), g2, (c, d) = two_pairs
        g1.new_edge(a, b)
        g2.new_edge(c, d)
        mapping: NodeMap[int] = NodeMap(g2)
        mapping[c] = a

        join(g1, g2, mapping)

        d1 = mapping[d]
        assert g1.node_count == 3
        assert undirected_pairs(g1) == _pairs((a, b), (a, d1), (b, d1))

    def test_redirected_edge_keeps_direction(self) -> None:
        g1 = Graph()
        a = g1.new_node()
        g2 = Graph()
        c, d = g2.new_node(), g2.new_node()
        g2.new_edge(d, c)
        mapping: NodeMap[int] = NodeMap(g2)
        mapping[c] = a

        join(g1, g2, mapping)

        d1 = mapping[d]
        # The redirected d -> a edge is created before the a -> d cross edge
        assert [g1.endpoints(edge) for edge in g1.edges] == [(d1, a)]

    def test_self_loop_on_identified_node_survives(self) -> None:
        g1 = Graph()
        a = g1.new_node()
        g2 = Graph()
        c = g2.new_node()
        g2.new_edge(c, c)
        mapping: NodeMap[int] = NodeMap(g2)
        mapping[c] = a

        join(g1, g2, mapping)

        assert g1.nodes == [a]
        assert undirected_pairs(g1) == [(a, a)]

    def test_preexisting_parallel_edges_are_collapsed(self) -> None:
        g1 = Graph()
        a, b = g1.new_node(), g1.new_node()
        g1.new_edge(a, b)
        g1.new_edge(b, a)

        g2 = Graph()
        join(g1, g2, NodeMap(g2))

        assert undirected_pairs(g1) == [(a, b)]

    def test_result_is_parallel_free(self, two_pairs: tuple[Graph, list[int], Graph, list[int]]) -> None:
        g1, (a, b), g2, (c, d) = two_pairs
        g2.new_edge(c, d)
        mapping: NodeMap[int] = NodeMap(g2)
        mapping[c] = a
        mapping[d] = b

        join(g1, g2, mapping)

        assert g1.node_count == 2
        assert is_parallel_free_undirected(g1)
        assert undirected_pairs(g1) == [(a, b)]


class TestJoinPreconditions:
    def test_unbound_mapping(self, two_pairs: tuple[Graph, list[int], Graph, list[int]]) -> None:
        g1, _, g2, _ = two_pairs

        with pytest.raises(CorrespondenceError, match="bound to the second graph"):
            join(g1, g2, NodeMap())

    def test_identification_outside_first_graph(self, two_pairs: tuple[Graph, list[int], Graph, list[int]]) -> None:
        g1, _, g2, (c, _) = two_pairs
        mapping: NodeMap[int] = NodeMap(g2)
        mapping[c] = 1000

        with pytest.raises(CorrespondenceError, match="not in the first graph"):
            join(g1, g2, mapping)
        assert g1.node_count == 2
