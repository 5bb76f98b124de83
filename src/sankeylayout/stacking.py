"""
Link stacking at node edges.

The links leaving a node are stacked top to bottom along its right edge and
the links entering it along its left edge. This module keeps those stacks
ordered, computes where a node would have to sit for one link to run
straight, and assigns the final link offsets.
"""

from __future__ import annotations

from typing import Iterable

from .graph import Link, Node


def _by_target_breadth(link: Link) -> tuple[float, int]:
    return (link.target.y0, link.index)


def _by_source_breadth(link: Link) -> tuple[float, int]:
    return (link.source.y0, link.index)


def reorder_node_links(node: Node) -> None:
    """
    Sort a node's outgoing links by target position and its incoming links
    by source position, breaking ties by link index.
    """
    node.source_links.sort(key=_by_target_breadth)
    node.target_links.sort(key=_by_source_breadth)


def reorder_links(nodes: Iterable[Node]) -> None:
    for node in nodes:
        reorder_node_links(node)


def target_top(source: Node, target: Node, padding: float) -> float:
    """
    Top of ``target`` that would line up the link from ``source`` with its
    slot in the source's outgoing stack.

    Args:
        source: Node the link leaves
        target: Node the link enters
        padding: Node padding in effect for this layout

    Returns:
        Ideal y0 for the target
    """
    y = source.y0 - (len(source.source_links) - 1) * padding / 2
    for link in source.source_links:
        if link.target is target:
            break
        y += link.width + padding
    for link in target.target_links:
        if link.source is source:
            break
        y -= link.width
    return y


def source_top(source: Node, target: Node, padding: float) -> float:
    """
    Top of ``source`` that would line up the link to ``target`` with its
    slot in the target's incoming stack.

    Mirror image of target_top.
    """
    y = target.y0 - (len(target.target_links) - 1) * padding / 2
    for link in target.target_links:
        if link.source is source:
            break
        y += link.width + padding
    for link in source.source_links:
        if link.target is target:
            break
        y -= link.width
    return y


def compute_link_breadths(nodes: Iterable[Node]) -> None:
    """
    Assign each link's centre at both ends by walking the final stacks.

    Outgoing links set ``y0`` down the source's right edge, incoming links
    set ``y1`` down the target's left edge.
    """
    for node in nodes:
        y0 = node.y0
        y1 = y0
        for link in node.source_links:
            link.y0 = y0 + link.width / 2
            y0 += link.width
        for link in node.target_links:
            link.y1 = y1 + link.width / 2
            y1 += link.width
