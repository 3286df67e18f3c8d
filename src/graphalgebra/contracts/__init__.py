# src/graphalgebra/contracts/__init__.py
"""Shared contracts: enums and exceptions used across subsystem boundaries.

Leaf package: no imports from graphalgebra.core or graphalgebra.operations.
"""

from graphalgebra.contracts.enums import ProductKind
from graphalgebra.contracts.errors import (
    ConfigurationError,
    CorrespondenceError,
    GraphAlgebraError,
    GraphError,
)

__all__ = [
    "ConfigurationError",
    "CorrespondenceError",
    "GraphAlgebraError",
    "GraphError",
    "ProductKind",
]
