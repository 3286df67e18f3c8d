# tests/property/test_join_properties.py
"""Property-based tests for join."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from graphalgebra.core.graph import is_parallel_free_undirected
from graphalgebra.core.maps import NodeMap
from graphalgebra.operations import join
from tests.strategies import STANDARD_SETTINGS, GraphShape, build_graph, multigraphs


class TestJoinProperties:
    @given(shape1=multigraphs(), shape2=multigraphs(), data=st.data())
    @STANDARD_SETTINGS
    def test_join_accounting(self, shape1: GraphShape, shape2: GraphShape, data: st.DataObject) -> None:
        g1, nodes1 = build_graph(shape1)
        g2, nodes2 = build_graph(shape2)
        identified = data.draw(st.integers(min_value=0, max_value=min(len(nodes1), len(nodes2))))
        targets = data.draw(st.permutations(nodes1))[:identified]
        mapping: NodeMap[int] = NodeMap(g2)
        for n2, n1 in zip(nodes2, targets, strict=False):
            mapping[n2] = n1

        join(g1, g2, mapping)

        assert g1.node_count == len(nodes1) + len(nodes2) - identified
        assert mapping.unset_nodes() == []
        assert all(mapping[n2] == n1 for n2, n1 in zip(nodes2, targets, strict=False))
        assert is_parallel_free_undirected(g1)
        for n1 in nodes1:
            neighbours = g1.neighbours(n1)
            for n2 in nodes2:
                if mapping[n2] != n1:
                    assert mapping[n2] in neighbours
