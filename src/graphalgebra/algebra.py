# src/graphalgebra/algebra.py
"""GraphAlgebra facade: operations with configured defaults.

The module-level functions in graphalgebra.operations take every policy
flag explicitly. GraphAlgebra binds those flags to a GraphAlgebraSettings
instance so callers configure them once (typically from YAML via
load_settings) and override per call only where needed.
"""

from __future__ import annotations

from pathlib import Path

from graphalgebra.contracts.enums import ProductKind
from graphalgebra.core.config import GraphAlgebraSettings, load_settings
from graphalgebra.core.graph import Graph, NodeID
from graphalgebra.core.logging import configure_logging
from graphalgebra.core.maps import NodeMap, ProductNodeMap
from graphalgebra.operations import complement, graph_union, intersection, join, product


class GraphAlgebra:
    """Graph operations bound to a settings object."""

    def __init__(self, settings: GraphAlgebraSettings | None = None) -> None:
        self._settings = settings if settings is not None else GraphAlgebraSettings()

    @classmethod
    def from_config(cls, config_path: Path, *, configure_logs: bool = True) -> GraphAlgebra:
        """Load settings from YAML and optionally apply the logging section."""
        settings = load_settings(config_path)
        if configure_logs:
            configure_logging(
                json_output=settings.logging.json_output,
                level=settings.logging.level,
            )
        return cls(settings)

    @property
    def settings(self) -> GraphAlgebraSettings:
        return self._settings

    def union(
        self,
        g1: Graph,
        g2: Graph,
        map2to1: NodeMap[int] | None = None,
        *,
        parallel_free: bool | None = None,
        directed: bool | None = None,
    ) -> NodeMap[int]:
        defaults = self._settings.union
        return graph_union(
            g1,
            g2,
            map2to1,
            parallel_free=defaults.parallel_free if parallel_free is None else parallel_free,
            directed=defaults.directed if directed is None else directed,
        )

    def product(
        self,
        kind: ProductKind,
        g1: Graph,
        g2: Graph,
        dest: Graph,
        node_in_product: ProductNodeMap | None = None,
        *,
        root: NodeID | None = None,
    ) -> ProductNodeMap:
        return product(kind, g1, g2, dest, node_in_product, root=root)

    def complement(
        self,
        g: Graph,
        *,
        directional: bool | None = None,
        allow_self_loops: bool | None = None,
    ) -> None:
        defaults = self._settings.complement
        complement(
            g,
            directional=defaults.directional if directional is None else directional,
            allow_self_loops=defaults.allow_self_loops if allow_self_loops is None else allow_self_loops,
        )

    def intersection(self, g1: Graph, g2: Graph, node_map: NodeMap[int]) -> None:
        intersection(g1, g2, node_map)

    def join(self, g1: Graph, g2: Graph, mapping: NodeMap[int]) -> NodeMap[int]:
        return join(g1, g2, mapping)
