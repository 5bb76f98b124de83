"""
Node alignment policies.

An alignment maps a node and the number of columns to the column the node
is drawn in. The four standard policies match d3-sankey; any callable with
the same signature can be used instead.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Union

from .errors import InvalidConfigurationError


NodeAlign = Callable[[Any, int], int]


class Align(IntEnum):
    """
    Standard alignment policies:
    - left: nodes sit at their depth
    - right: nodes sit at their height, counted from the last column
    - center: like left, but pure sources move next to their first target
    - justify: like left, but sinks move to the last column
    """
    left = 0
    right = 1
    center = 2
    justify = 3


def sankey_left(node: Any, n: int) -> int:
    return node.depth


def sankey_right(node: Any, n: int) -> int:
    return n - 1 - node.height


def sankey_justify(node: Any, n: int) -> int:
    return node.depth if node.source_links else n - 1


def sankey_center(node: Any, n: int) -> int:
    """
    Place a node at its depth if it has inputs, otherwise one column before
    the closest of its targets, otherwise in the first column.
    """
    if node.target_links:
        return node.depth
    if node.source_links:
        return min(link.target.depth for link in node.source_links) - 1
    return 0


ALIGN_FUNCTIONS: dict[Align, NodeAlign] = {
    Align.left: sankey_left,
    Align.right: sankey_right,
    Align.center: sankey_center,
    Align.justify: sankey_justify,
}


def resolve_align(align: Union[Align, str, int, NodeAlign]) -> NodeAlign:
    """
    Turn an alignment setting into an alignment function.

    Args:
        align: Align member, member name, member value, or a custom callable

    Returns:
        Function of (node, column_count) returning a column index

    Raises:
        InvalidConfigurationError: If the setting names no policy
    """
    if isinstance(align, Align):
        return ALIGN_FUNCTIONS[align]

    if isinstance(align, str):
        try:
            return ALIGN_FUNCTIONS[Align[align]]
        except KeyError:
            raise InvalidConfigurationError(f"unknown node alignment: {align!r}") from None

    if isinstance(align, int) and not isinstance(align, bool):
        try:
            return ALIGN_FUNCTIONS[Align(align)]
        except ValueError:
            raise InvalidConfigurationError(f"unknown node alignment: {align!r}") from None

    if callable(align):
        return align

    raise InvalidConfigurationError(f"node alignment must be an Align or a callable, not {align!r}")
