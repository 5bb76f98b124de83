"""
Immutable layout settings.

A LayoutConfig is taken from the Sankey generator at the start of every
layout call and threaded through the stages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union
import math

from .align import Align, NodeAlign, resolve_align
from .errors import InvalidConfigurationError
from .graph import Comparator, NodeIdAccessor, default_node_id


@dataclass(frozen=True)
class LayoutConfig:
    """
    Settings for one layout call.

    Attributes:
        x0, y0, x1, y1: Bounding rectangle of the diagram
        node_width: Horizontal size of every node
        node_padding: Vertical gap between nodes of a column
        iterations: Number of relaxation rounds
        align: Alignment policy, resolved to a function on construction
        node_sort: Optional comparator fixing node order within columns
        link_sort: Optional comparator fixing link order at each node
        node_id: Accessor used to resolve link endpoints given as ids
    """
    x0: float = 0.0
    y0: float = 0.0
    x1: float = 1.0
    y1: float = 1.0
    node_width: float = 24.0
    node_padding: float = 8.0
    iterations: int = 6
    align: Union[Align, str, NodeAlign] = Align.justify
    node_sort: Optional[Comparator] = None
    link_sort: Optional[Comparator] = None
    node_id: NodeIdAccessor = default_node_id

    def __post_init__(self) -> None:
        if not self.x1 > self.x0:
            raise InvalidConfigurationError(f"empty horizontal extent: [{self.x0}, {self.x1}]")
        if not self.y1 > self.y0:
            raise InvalidConfigurationError(f"empty vertical extent: [{self.y0}, {self.y1}]")
        if not self.node_width > 0:
            raise InvalidConfigurationError(f"node width must be positive: {self.node_width}")
        if not (self.node_padding >= 0 and math.isfinite(self.node_padding)):
            raise InvalidConfigurationError(f"node padding must be non-negative: {self.node_padding}")
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int) or self.iterations < 0:
            raise InvalidConfigurationError(f"iterations must be a non-negative integer: {self.iterations}")

        object.__setattr__(self, 'align', resolve_align(self.align))

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def with_padding(self, node_padding: float) -> LayoutConfig:
        """Copy of this config with a different node padding."""
        return replace(self, node_padding=node_padding)
