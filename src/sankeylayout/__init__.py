"""
sankeylayout: Sankey diagram layout engine

Python port of the d3-sankey layout algorithm.
"""

__version__ = "0.1.0"

from .align import Align, sankey_center, sankey_justify, sankey_left, sankey_right
from .errors import CyclicGraphError, InvalidConfigurationError, InvalidGraphError, SankeyError
from .graph import Link, Node, SankeyGraph
from .helpers import SankeyDataSet, generate_sankey_layout
from .layout import Sankey

__all__ = [
    "Align",
    "CyclicGraphError",
    "InvalidConfigurationError",
    "InvalidGraphError",
    "Link",
    "Node",
    "Sankey",
    "SankeyDataSet",
    "SankeyError",
    "SankeyGraph",
    "generate_sankey_layout",
    "sankey_center",
    "sankey_justify",
    "sankey_left",
    "sankey_right",
]
