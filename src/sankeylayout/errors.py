"""
Exceptions raised by the Sankey layout engine.

Every error is raised before the offending stage writes to the caller's
nodes or links.
"""


class SankeyError(Exception):
    """Base class for all layout errors."""


class InvalidGraphError(SankeyError, ValueError):
    """The nodes or links cannot form a flow graph."""


class CyclicGraphError(SankeyError, ValueError):
    """The flow graph contains a cycle."""


class InvalidConfigurationError(SankeyError, ValueError):
    """The layout configuration cannot produce a diagram."""
