"""
Sankey layout generator.

This module implements the Sankey class which provides:
- Fluent configuration of extent, node size, padding and iterations
- Pluggable node alignment and optional node/link ordering
- The layout pipeline: linking, values, depths and heights, columns,
  initial breadths, relaxation and link breadths

Tie-breaking follows d3-sankey, so diagrams match those drawn by d3.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union
import logging

from .align import Align, NodeAlign
from .columns import compute_ky, compute_node_layers, effective_padding, initialize_node_breadths
from .config import LayoutConfig
from .errors import InvalidConfigurationError
from .graph import (
    Comparator,
    Link,
    Node,
    NodeIdAccessor,
    SankeyGraph,
    compute_node_values,
    default_node_id,
    link_nodes,
    resolve_graph,
)
from .layers import compute_depths, compute_heights
from .relax import relax
from .stacking import compute_link_breadths

logger = logging.getLogger(__name__)

# Distinguishes "get" from "set to None" for the optional comparators
_UNSET: Any = object()


class Sankey:
    """
    Main interface to the Sankey layout.

    Every setting has an accessor that returns the current value when
    called without argument, and sets it and returns self for chaining
    otherwise::

        graph = Sankey().extent([[1, 1], [959, 494]]).node_width(15).layout(nodes, links)
    """

    def __init__(
        self,
        x0: float = 0.0,
        y0: float = 0.0,
        x1: float = 1.0,
        y1: float = 1.0,
        node_width: float = 24.0,
        node_padding: float = 8.0,
        align: Union[Align, str, NodeAlign] = Align.justify,
        iterations: int = 6,
        node_sort: Optional[Comparator] = None,
        link_sort: Optional[Comparator] = None,
        node_id: NodeIdAccessor = default_node_id
    ):
        """Initialize the generator with d3-sankey defaults."""
        self._x0 = x0
        self._y0 = y0
        self._x1 = x1
        self._y1 = y1
        self._nodeWidth = node_width
        self._nodePadding = node_padding
        self._align = align
        self._iterations = iterations
        self._nodeSort = node_sort
        self._linkSort = link_sort
        self._nodeId = node_id

    def extent(self, x: Optional[Sequence[Sequence[float]]] = None) -> Union[list[list[float]], Sankey]:
        """
        Get or set the bounding rectangle ``[[x0, y0], [x1, y1]]``.

        Args:
            x: Optional extent to set

        Returns:
            Current extent if x is None, otherwise self for chaining
        """
        if x is None:
            return [[self._x0, self._y0], [self._x1, self._y1]]

        (self._x0, self._y0), (self._x1, self._y1) = x
        return self

    def size(self, x: Optional[Sequence[float]] = None) -> Union[list[float], Sankey]:
        """
        Get or set the size ``[width, height]``.

        Setting a size moves the top-left corner of the extent to the origin.
        """
        if x is None:
            return [self._x1 - self._x0, self._y1 - self._y0]

        self._x0 = self._y0 = 0.0
        self._x1, self._y1 = x
        return self

    def node_width(self, x: Optional[float] = None) -> Union[float, Sankey]:
        """Get or set the horizontal size of every node."""
        if x is None:
            return self._nodeWidth

        self._nodeWidth = x
        return self

    def node_padding(self, x: Optional[float] = None) -> Union[float, Sankey]:
        """
        Get or set the vertical gap between nodes of a column.

        The padding is reduced during a layout when the fullest column could
        not otherwise fit, but the configured value is kept.
        """
        if x is None:
            return self._nodePadding

        self._nodePadding = x
        return self

    def iterations(self, x: Optional[int] = None) -> Union[int, Sankey]:
        """Get or set the number of relaxation rounds."""
        if x is None:
            return self._iterations

        self._iterations = x
        return self

    def node_align(
        self,
        x: Optional[Union[Align, str, NodeAlign]] = None
    ) -> Union[Align, str, NodeAlign, Sankey]:
        """
        Get or set the alignment policy.

        Args:
            x: An Align member or its name ('left', 'right', 'center',
               'justify'), or a function of (node, column_count)

        Returns:
            Current policy if x is None, otherwise self for chaining
        """
        if x is None:
            return self._align

        self._align = x
        return self

    def node_sort(self, x: Optional[Comparator] = _UNSET) -> Union[Optional[Comparator], Sankey]:
        """
        Get or set the comparator ordering nodes within each column.

        With a comparator the order is fixed and relaxation no longer sorts
        columns by position. Pass None to restore the default.
        """
        if x is _UNSET:
            return self._nodeSort

        self._nodeSort = x
        return self

    def link_sort(self, x: Optional[Comparator] = _UNSET) -> Union[Optional[Comparator], Sankey]:
        """
        Get or set the comparator ordering the links stacked at each node.

        With a comparator the stacks are never reordered by position.
        Pass None to restore the default.
        """
        if x is _UNSET:
            return self._linkSort

        self._linkSort = x
        return self

    def node_id(self, x: Optional[NodeIdAccessor] = None) -> Union[NodeIdAccessor, Sankey]:
        """Get or set the accessor used to resolve link endpoints given as ids."""
        if x is None:
            return self._nodeId

        self._nodeId = x
        return self

    def config(self) -> LayoutConfig:
        """
        Snapshot of the current settings.

        Raises:
            InvalidConfigurationError: If the settings cannot produce a layout
        """
        return LayoutConfig(
            x0=self._x0,
            y0=self._y0,
            x1=self._x1,
            y1=self._y1,
            node_width=self._nodeWidth,
            node_padding=self._nodePadding,
            iterations=self._iterations,
            align=self._align,
            node_sort=self._nodeSort,
            link_sort=self._linkSort,
            node_id=self._nodeId,
        )

    def layout(self, nodes: Sequence[Node], links: Sequence[Link]) -> SankeyGraph:
        """
        Compute the layout of a flow graph in place.

        Settings, links, acyclicity and the presence of some flow are all
        checked before the nodes and links are written to. Every derived
        field is recomputed, so calling again on the same objects gives the
        same result.

        Args:
            nodes: Nodes; their order breaks ties
            links: Links between those nodes

        Returns:
            SankeyGraph over the same node and link lists

        Raises:
            InvalidConfigurationError: If the settings are unusable or no
                node carries any value
            InvalidGraphError: If a link is dangling or has a non-positive value
            CyclicGraphError: If the links form a cycle
        """
        config = self.config()
        logger.debug("Laying out %d nodes and %d links", len(nodes), len(links))

        edges = resolve_graph(nodes, links, config.node_id)
        depths = compute_depths(len(nodes), edges)
        heights = compute_heights(len(nodes), edges)
        values = compute_node_values(nodes, links, edges)
        if nodes and not any(value > 0 for value in values):
            raise InvalidConfigurationError("vertical scale is undefined: no node carries any value")

        link_nodes(nodes, links, edges, config.link_sort)
        for node, value, depth, height in zip(nodes, values, depths, heights):
            node.value = value
            node.depth = depth
            node.height = height

        if not nodes:
            return SankeyGraph(nodes, links)

        columns = compute_node_layers(nodes, config)
        py = effective_padding(columns, config)
        if py != config.node_padding:
            logger.debug("Node padding reduced from %g to %g", config.node_padding, py)
            config = config.with_padding(py)

        ky = compute_ky(columns, config)
        logger.debug("Vertical scale ky=%g", ky)
        initialize_node_breadths(columns, ky, config)
        relax(columns, config)
        compute_link_breadths(nodes)

        logger.debug("Layout complete")
        return SankeyGraph(nodes, links, ky)
