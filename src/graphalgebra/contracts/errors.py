# src/graphalgebra/contracts/errors.py
"""Exception hierarchy for graph operations.

None of these are recoverable mid-operation: when one is raised after the
destination graph has started to change, the destination is in an undefined
intermediate state and must be discarded, not repaired.
"""


class GraphAlgebraError(Exception):
    """Base class for all graphalgebra errors."""

    pass


class GraphError(GraphAlgebraError, ValueError):
    """Raised when a node or edge handle does not belong to the graph."""

    pass


class CorrespondenceError(GraphAlgebraError, ValueError):
    """Raised when a node correspondence map violates an operation's precondition.

    Examples: the map is not bound to any graph, it is bound to the wrong
    graph, or an identification points at a node outside the target graph.
    """

    pass


class ConfigurationError(GraphAlgebraError, ValueError):
    """Raised when settings or operation parameters cannot be used."""

    pass
