"""
Sankey graph model: nodes, links and the linking stage.

Links may name their endpoints either by node object or by node id. The
graph is validated against integer handles (positions in the node list)
before any node or link is written, then committed onto the objects.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Hashable, Optional, Sequence
import math

import numpy as np

from .errors import InvalidGraphError


Comparator = Callable[[Any, Any], float]
NodeIdAccessor = Callable[[Any], Optional[Hashable]]


class Node:
    """
    Sankey node.

    Attributes set by the caller are ``id``, ``label`` and ``fixed_value``;
    everything else is computed by the layout and reset on every call.
    Any extra keyword arguments are stored as attributes.
    """

    def __init__(
        self,
        id: Optional[Hashable] = None,
        label: Optional[str] = None,
        fixed_value: Optional[float] = None,
        **kwargs
    ):
        self.id = id
        self.label = label
        self.fixed_value = fixed_value

        self.index: int = 0
        self.value: float = 0.0
        self.depth: int = 0  # distance from source
        self.height: int = 0  # distance to sink
        self.layer: int = 0  # column
        self.x0: float = 0.0
        self.x1: float = 0.0
        self.y0: float = 0.0
        self.y1: float = 0.0
        self.source_links: list[Link] = []
        self.target_links: list[Link] = []

        # Copy over any additional properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)


class Link:
    """
    Flow between two nodes.

    Attributes:
        source: Source node, or its id
        target: Target node, or its id
        value: Flow magnitude, must be positive
    """

    def __init__(self, source: Any, target: Any, value: float, **kwargs):
        self.source = source
        self.target = target
        self.value = value

        self.index: int = 0
        self.width: float = 0.0
        self.y0: float = 0.0  # centre at the source's right edge
        self.y1: float = 0.0  # centre at the target's left edge

        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)


class SankeyGraph:
    """
    The nodes and links of a computed layout.

    Holds the caller's own lists; ``ky`` is the vertical scale that was used.
    """

    def __init__(self, nodes: Sequence[Node], links: Sequence[Link], ky: float = 0.0):
        self.nodes = nodes
        self.links = links
        self.ky = ky

    def node_extents(self) -> np.ndarray:
        """
        Node rectangles as an (n, 4) array of ``x0, y0, x1, y1`` rows.
        """
        return np.array(
            [[n.x0, n.y0, n.x1, n.y1] for n in self.nodes],
            dtype=float
        ).reshape(-1, 4)

    def link_extents(self) -> np.ndarray:
        """
        Link bands as an (m, 5) array of ``x_start, y0, x_end, y1, width`` rows.

        ``x_start`` is the source's right edge and ``x_end`` the target's left
        edge, which is all a renderer needs to draw the band.
        """
        return np.array(
            [[l.source.x1, l.y0, l.target.x0, l.y1, l.width] for l in self.links],
            dtype=float
        ).reshape(-1, 5)


def default_node_id(node: Any) -> Optional[Hashable]:
    """Read a node's identity from its ``id`` attribute."""
    return getattr(node, 'id', None)


def _is_positive(value: Any) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def resolve_graph(
    nodes: Sequence[Any],
    links: Sequence[Any],
    node_id: NodeIdAccessor = default_node_id
) -> list[tuple[int, int]]:
    """
    Validate the graph and resolve every link to a pair of node handles.

    Nothing is written to nodes or links.

    Args:
        nodes: Nodes in tie-break order
        links: Links whose endpoints are node objects or node ids
        node_id: Accessor giving the id of a node (None for anonymous nodes)

    Returns:
        (source_handle, target_handle) for each link, in link order

    Raises:
        InvalidGraphError: On duplicate ids, invalid values or dangling endpoints
    """
    handles = {id(node): i for i, node in enumerate(nodes)}
    by_id: dict[Hashable, int] = {}

    for i, node in enumerate(nodes):
        key = node_id(node)
        if key is not None:
            if key in by_id:
                raise InvalidGraphError(f"duplicate node id: {key!r}")
            by_id[key] = i

        fixed = getattr(node, 'fixed_value', None)
        if fixed is not None and not (_is_positive(fixed) or fixed == 0):
            raise InvalidGraphError(f"invalid fixed value for node {key!r}: {fixed!r}")

    def find(endpoint: Any) -> Optional[int]:
        handle = handles.get(id(endpoint))
        if handle is not None:
            return handle
        try:
            return by_id.get(endpoint)
        except TypeError:  # unhashable, so not an id
            return None

    edges = []
    for j, link in enumerate(links):
        if not _is_positive(link.value):
            raise InvalidGraphError(f"link {j} has non-positive value: {link.value!r}")

        s = find(link.source)
        if s is None:
            raise InvalidGraphError(f"missing source for link {j}: {link.source!r}")
        t = find(link.target)
        if t is None:
            raise InvalidGraphError(f"missing target for link {j}: {link.target!r}")

        edges.append((s, t))

    return edges


def link_nodes(
    nodes: Sequence[Node],
    links: Sequence[Link],
    edges: Sequence[tuple[int, int]],
    link_sort: Optional[Comparator] = None
) -> None:
    """
    Commit resolved links onto nodes.

    Resets every derived field, assigns indices, replaces link endpoints by
    node objects and fills each node's outgoing and incoming link lists.

    Args:
        nodes: Nodes, in the order used by resolve_graph
        links: Links, in the order used by resolve_graph
        edges: Output of resolve_graph
        link_sort: Optional comparator applied to both link lists of every node
    """
    for i, node in enumerate(nodes):
        node.index = i
        node.source_links = []
        node.target_links = []
        node.value = 0.0
        node.depth = node.height = node.layer = 0
        node.x0 = node.x1 = node.y0 = node.y1 = 0.0

    for j, (link, (s, t)) in enumerate(zip(links, edges)):
        source = nodes[s]
        target = nodes[t]
        link.index = j
        link.source = source
        link.target = target
        link.width = link.y0 = link.y1 = 0.0
        source.source_links.append(link)
        target.target_links.append(link)

    if link_sort is not None:
        key = cmp_to_key(link_sort)
        for node in nodes:
            node.source_links.sort(key=key)
            node.target_links.sort(key=key)


def compute_node_values(
    nodes: Sequence[Any],
    links: Sequence[Any],
    edges: Sequence[tuple[int, int]]
) -> list[float]:
    """
    Value of each node: its fixed value, or else the larger of its outgoing
    and incoming flow totals.

    Works on the handles from resolve_graph, so nothing is written.

    Args:
        nodes: Nodes, in the order used by resolve_graph
        links: Links, in the order used by resolve_graph
        edges: Output of resolve_graph

    Returns:
        Value per node handle
    """
    out_sums = [0.0] * len(nodes)
    in_sums = [0.0] * len(nodes)
    for link, (s, t) in zip(links, edges):
        out_sums[s] += link.value
        in_sums[t] += link.value

    values = []
    for node, out_sum, in_sum in zip(nodes, out_sums, in_sums):
        fixed = getattr(node, 'fixed_value', None)
        values.append(fixed if fixed is not None else max(out_sum, in_sum))
    return values
