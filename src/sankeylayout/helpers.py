"""
Convenience wrappers around the Sankey generator.
"""

from __future__ import annotations

from typing import Any, Mapping

from .graph import Link, Node, SankeyGraph
from .layout import Sankey


def generate_sankey_layout(
    width: float = 1000.0,
    height: float = 600.0,
    node_width: float = 20.0,
    node_padding: float = 15.0
) -> Sankey:
    """
    Create a generator for a diagram of the given size, anchored at the origin.

    Args:
        width: Width of the drawing area
        height: Height of the drawing area
        node_width: Horizontal size of every node
        node_padding: Vertical gap between nodes of a column

    Returns:
        Configured Sankey generator
    """
    return Sankey(
        x0=0.0,
        y0=0.0,
        x1=width,
        y1=height,
        node_width=node_width,
        node_padding=node_padding
    )


class SankeyDataSet:
    """
    Nodes and links kept together for repeated layouts.
    """

    def __init__(self, nodes: list[Node], links: list[Link]):
        self.nodes = nodes
        self.links = links

    def layout(self, sankey: Sankey) -> SankeyGraph:
        """Lay out the data set in place with the given generator."""
        return sankey.layout(self.nodes, self.links)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SankeyDataSet:
        """
        Build a data set from a d3-style ``{"nodes": [...], "links": [...]}`` mapping.

        Node entries become Node keyword arguments; a node without an ``id``
        is identified by its position, so links may refer to nodes by id or,
        for anonymous nodes, by index. Link entries need ``source``,
        ``target`` and ``value``; other keys are kept as attributes.

        Args:
            data: Mapping with "nodes" and "links" lists of dicts

        Returns:
            A new SankeyDataSet
        """
        nodes = []
        for i, entry in enumerate(data.get('nodes', [])):
            properties = dict(entry)
            if properties.get('id') is None:
                properties['id'] = i
            nodes.append(Node(**properties))

        links = [Link(**entry) for entry in data.get('links', [])]
        return cls(nodes, links)
