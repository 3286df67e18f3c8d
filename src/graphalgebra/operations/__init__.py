# src/graphalgebra/operations/__init__.py
"""Graph operations: union, products, complement, intersection, join.

Binary operations other than the products write into their first argument.
Products build into a separate destination graph, which is cleared first.
"""

from graphalgebra.operations.complement import complement
from graphalgebra.operations.intersection import intersection
from graphalgebra.operations.join import join
from graphalgebra.operations.product import (
    EdgeRule,
    cartesian_product,
    co_normal_product,
    graph_product,
    lexicographical_product,
    modular_product,
    product,
    rooted_product,
    strong_product,
    tensor_product,
)
from graphalgebra.operations.union import disjoint_union, graph_union

__all__ = [
    "EdgeRule",
    "cartesian_product",
    "co_normal_product",
    "complement",
    "disjoint_union",
    "graph_product",
    "graph_union",
    "intersection",
    "join",
    "lexicographical_product",
    "modular_product",
    "product",
    "rooted_product",
    "strong_product",
    "tensor_product",
]
