"""
Iterative relaxation of node positions with collision resolution.

Each round pulls nodes towards the flow-weighted position at which their
links would run straight, sweeping right-to-left and then left-to-right, and
pushes apart nodes of the same column after each column is moved. The step
size decays while the collision strength grows, so the last round leaves
every column free of overlaps.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Sequence

from .config import LayoutConfig
from .graph import Node
from .stacking import reorder_node_links, source_top, target_top


RELAXATION_DECAY = 0.99
COLLISION_EPSILON = 1e-6

_by_breadth = attrgetter('y0')


def relax(columns: Sequence[list[Node]], config: LayoutConfig) -> None:
    """
    Run all relaxation rounds.

    Round i moves nodes by alpha = 0.99**i of the way to their ideal
    position and resolves collisions with strength
    beta = max(1 - alpha, (i + 1) / iterations).
    """
    n = config.iterations
    for i in range(n):
        alpha = RELAXATION_DECAY ** i
        beta = max(1 - alpha, (i + 1) / n)
        relax_right_to_left(columns, alpha, beta, config)
        relax_left_to_right(columns, alpha, beta, config)


def _settle_column(column: list[Node], beta: float, config: LayoutConfig) -> None:
    if config.node_sort is None:
        column.sort(key=_by_breadth)
    resolve_collisions(column, beta, config)


def relax_left_to_right(
    columns: Sequence[list[Node]],
    alpha: float,
    beta: float,
    config: LayoutConfig
) -> None:
    """
    Move nodes of the second to last column towards their sources.

    Args:
        columns: Node columns, left to right
        alpha: Fraction of the way to move towards the ideal position
        beta: Collision resolution strength
        config: Layout settings, with the effective padding
    """
    py = config.node_padding
    for i in range(1, len(columns)):
        column = columns[i]
        for target in column:
            y = 0.0
            w = 0.0
            for link in target.target_links:
                source = link.source
                v = link.value * (target.layer - source.layer)
                y += target_top(source, target, py) * v
                w += v
            if not w > 0:
                continue
            dy = (y / w - target.y0) * alpha
            target.y0 += dy
            target.y1 += dy
            if config.link_sort is None:
                reorder_node_links(target)
        _settle_column(column, beta, config)


def relax_right_to_left(
    columns: Sequence[list[Node]],
    alpha: float,
    beta: float,
    config: LayoutConfig
) -> None:
    """
    Move nodes of the second-to-last to first column towards their targets.
    """
    py = config.node_padding
    for i in range(len(columns) - 2, -1, -1):
        column = columns[i]
        for source in column:
            y = 0.0
            w = 0.0
            for link in source.source_links:
                target = link.target
                v = link.value * (target.layer - source.layer)
                y += source_top(source, target, py) * v
                w += v
            if not w > 0:
                continue
            dy = (y / w - source.y0) * alpha
            source.y0 += dy
            source.y1 += dy
            if config.link_sort is None:
                reorder_node_links(source)
        _settle_column(column, beta, config)


def resolve_collisions(nodes: list[Node], alpha: float, config: LayoutConfig) -> None:
    """
    Push apart overlapping nodes of a column sorted by y0.

    Works outward from the middle node, then once more against the bottom
    and the top of the extent.

    Args:
        nodes: One column, sorted top to bottom
        alpha: Fraction of each overlap removed
        config: Layout settings, with the effective padding
    """
    if not nodes:
        return
    py = config.node_padding
    i = len(nodes) >> 1
    subject = nodes[i]
    _resolve_bottom_to_top(nodes, subject.y0 - py, i - 1, alpha, py)
    _resolve_top_to_bottom(nodes, subject.y1 + py, i + 1, alpha, py)
    _resolve_bottom_to_top(nodes, config.y1, len(nodes) - 1, alpha, py)
    _resolve_top_to_bottom(nodes, config.y0, 0, alpha, py)


def _resolve_top_to_bottom(nodes: list[Node], y: float, start: int, alpha: float, py: float) -> None:
    # y is the smallest y0 the next node may keep
    for i in range(start, len(nodes)):
        node = nodes[i]
        dy = (y - node.y0) * alpha
        if dy > COLLISION_EPSILON:
            node.y0 += dy
            node.y1 += dy
        y = node.y1 + py


def _resolve_bottom_to_top(nodes: list[Node], y: float, start: int, alpha: float, py: float) -> None:
    # y is the largest y1 the next node may keep
    for i in range(start, -1, -1):
        node = nodes[i]
        dy = (node.y1 - y) * alpha
        if dy > COLLISION_EPSILON:
            node.y0 -= dy
            node.y1 -= dy
        y = node.y0 - py
