"""
graphalgebra: Unary and binary operations on directed multigraphs.

Union, products, complement, intersection and join, built on a
NetworkX-backed multigraph container with explicit node correspondence maps.
"""

from graphalgebra.algebra import GraphAlgebra
from graphalgebra.contracts import (
    ConfigurationError,
    CorrespondenceError,
    GraphAlgebraError,
    GraphError,
    ProductKind,
)
from graphalgebra.core import Graph, NodeMap, ProductNodeMap
from graphalgebra.operations import (
    cartesian_product,
    co_normal_product,
    complement,
    disjoint_union,
    graph_product,
    graph_union,
    intersection,
    join,
    lexicographical_product,
    modular_product,
    product,
    rooted_product,
    strong_product,
    tensor_product,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CorrespondenceError",
    "Graph",
    "GraphAlgebra",
    "GraphAlgebraError",
    "GraphError",
    "NodeMap",
    "ProductKind",
    "ProductNodeMap",
    "__version__",
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
