"""
Column placement and initial vertical breadths.

Nodes are bucketed into columns by the alignment policy and given their
horizontal extent. A single vertical scale is then chosen so that the
fullest column exactly fits, and every column is stacked and centred.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence
import logging
import math

from .config import LayoutConfig
from .errors import InvalidConfigurationError
from .graph import Node
from .stacking import reorder_links

logger = logging.getLogger(__name__)


def compute_node_layers(nodes: Sequence[Node], config: LayoutConfig) -> list[list[Node]]:
    """
    Assign every node a column and a horizontal extent.

    The number of columns is one more than the largest depth. Alignment
    results are floored and clamped into range.

    Args:
        nodes: Linked nodes with depth and height set
        config: Layout settings

    Returns:
        Columns of nodes, left to right, in node order or node_sort order
    """
    column_count = max(node.depth for node in nodes) + 1
    kx = (config.x1 - config.x0 - config.node_width) / (column_count - 1) if column_count > 1 else 0.0
    logger.debug("Placing nodes in %d columns, kx=%g", column_count, kx)

    columns: list[list[Node]] = [[] for _ in range(column_count)]
    for node in nodes:
        layer = math.floor(config.align(node, column_count))
        layer = max(0, min(column_count - 1, layer))
        node.layer = layer
        node.x0 = config.x0 + layer * kx
        node.x1 = node.x0 + config.node_width
        columns[layer].append(node)

    if config.node_sort is not None:
        key = cmp_to_key(config.node_sort)
        for column in columns:
            column.sort(key=key)

    return columns


def effective_padding(columns: Sequence[Sequence[Node]], config: LayoutConfig) -> float:
    """
    Node padding shrunk, if needed, so the fullest column can hold its gaps.
    """
    most = max(len(column) for column in columns)
    if most <= 1:
        return config.node_padding
    return min(config.node_padding, config.height / (most - 1))


def compute_ky(columns: Sequence[Sequence[Node]], config: LayoutConfig) -> float:
    """
    Vertical units per unit of flow, shared by the whole diagram.

    Each column with positive total value proposes the scale that would make
    it exactly fill the height after padding; the smallest proposal wins.

    Raises:
        InvalidConfigurationError: If no column carries any value
    """
    ky = math.inf
    for column in columns:
        if not column:
            continue
        total = 0.0
        for node in column:
            total += node.value
        if total > 0:
            ky = min(ky, (config.height - (len(column) - 1) * config.node_padding) / total)

    if math.isinf(ky):
        raise InvalidConfigurationError("vertical scale is undefined: no column carries any value")
    return ky


def initialize_node_breadths(
    columns: Sequence[list[Node]],
    ky: float,
    config: LayoutConfig
) -> None:
    """
    Stack each column from the top, then spread its slack evenly.

    Outgoing link widths are set on the way. Unless the link order is fixed
    by link_sort, each column's link stacks are then ordered by the current
    positions of the nodes at their other end.

    Args:
        columns: Output of compute_node_layers
        ky: Output of compute_ky
        config: Layout settings, with the effective padding
    """
    py = config.node_padding
    for column in columns:
        y = config.y0
        for node in column:
            node.y0 = y
            node.y1 = y + node.value * ky
            y = node.y1 + py
            for link in node.source_links:
                link.width = link.value * ky

        spacing = (config.y1 - y + py) / (len(column) + 1)
        for i, node in enumerate(column):
            node.y0 += spacing * (i + 1)
            node.y1 += spacing * (i + 1)

        if config.link_sort is None:
            reorder_links(column)
