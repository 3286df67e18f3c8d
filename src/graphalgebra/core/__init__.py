# src/graphalgebra/core/__init__.py
"""Core infrastructure: graph container, correspondence maps, configuration, logging."""

from graphalgebra.core.config import (
    ComplementSettings,
    GraphAlgebraSettings,
    LoggingSettings,
    UnionSettings,
    load_settings,
)
from graphalgebra.core.graph import (
    AdjEntry,
    EdgeID,
    Graph,
    NodeID,
)
from graphalgebra.core.logging import (
    configure_logging,
    get_logger,
)
from graphalgebra.core.maps import NodeMap, ProductNodeMap

__all__ = [
    "AdjEntry",
    "ComplementSettings",
    "EdgeID",
    "Graph",
    "GraphAlgebraSettings",
    "LoggingSettings",
    "NodeID",
    "NodeMap",
    "ProductNodeMap",
    "UnionSettings",
    "configure_logging",
    "get_logger",
    "load_settings",
]
