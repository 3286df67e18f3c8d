# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import multigraphs, simple_graphs, STANDARD_SETTINGS
"""

from tests.strategies.graphs import GraphShape, build_graph, multigraphs, simple_graphs
from tests.strategies.settings import QUICK_SETTINGS, SLOW_SETTINGS, STANDARD_SETTINGS

__all__ = [
    "QUICK_SETTINGS",
    "SLOW_SETTINGS",
    "STANDARD_SETTINGS",
    "GraphShape",
    "build_graph",
    "multigraphs",
    "simple_graphs",
]
