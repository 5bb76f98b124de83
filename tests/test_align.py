"""Tests for alignment policies."""

import pytest
from sankeylayout.align import (
    Align, ALIGN_FUNCTIONS, resolve_align,
    sankey_left, sankey_right, sankey_justify, sankey_center
)
from sankeylayout.errors import InvalidConfigurationError


class SimpleNode:
    """Simple node for testing."""

    def __init__(self, depth: int = 0, height: int = 0):
        self.depth = depth
        self.height = height
        self.source_links = []
        self.target_links = []


class SimpleLink:
    """Simple link for testing."""

    def __init__(self, source: SimpleNode, target: SimpleNode):
        self.source = source
        self.target = target
        source.source_links.append(self)
        target.target_links.append(self)


class TestAlign:
    """Test Align enum."""

    def test_values(self):
        """Test enum values."""
        assert Align.left == 0
        assert Align.right == 1
        assert Align.center == 2
        assert Align.justify == 3

    def test_string_access(self):
        """Test accessing by name."""
        assert Align['justify'] == Align.justify

    def test_every_member_has_function(self):
        """Test the function table is complete."""
        assert set(ALIGN_FUNCTIONS) == set(Align)


class TestPolicies:
    """Test the four standard policies."""

    def test_left(self):
        """Test left uses depth."""
        assert sankey_left(SimpleNode(depth=2, height=1), 5) == 2

    def test_right(self):
        """Test right counts height from the last column."""
        assert sankey_right(SimpleNode(depth=0, height=1), 5) == 3

    def test_justify_with_outputs(self):
        """Test justify keeps depth when the node has outgoing links."""
        a, b = SimpleNode(depth=1), SimpleNode(depth=2)
        SimpleLink(a, b)
        assert sankey_justify(a, 5) == 1

    def test_justify_sink(self):
        """Test justify moves sinks to the last column."""
        a, b = SimpleNode(depth=1), SimpleNode(depth=2)
        SimpleLink(a, b)
        assert sankey_justify(b, 5) == 4

    def test_justify_isolated(self):
        """Test isolated nodes count as sinks."""
        assert sankey_justify(SimpleNode(), 3) == 2

    def test_center_with_inputs(self):
        """Test center keeps depth when the node has incoming links."""
        a, b = SimpleNode(depth=0), SimpleNode(depth=3)
        SimpleLink(a, b)
        assert sankey_center(b, 5) == 3

    def test_center_source(self):
        """Test center puts a source just before its nearest target."""
        a = SimpleNode(depth=0)
        far, near = SimpleNode(depth=3), SimpleNode(depth=2)
        SimpleLink(a, far)
        SimpleLink(a, near)
        assert sankey_center(a, 5) == 1

    def test_center_isolated(self):
        """Test isolated nodes go to the first column."""
        assert sankey_center(SimpleNode(depth=0, height=0), 4) == 0


class TestResolveAlign:
    """Test alignment setting resolution."""

    def test_member(self):
        """Test Align member."""
        assert resolve_align(Align.right) is sankey_right

    def test_name(self):
        """Test member name."""
        assert resolve_align('center') is sankey_center

    def test_value(self):
        """Test member value."""
        assert resolve_align(0) is sankey_left

    def test_callable(self):
        """Test custom policy passes through."""
        def custom(node, n):
            return n // 2

        assert resolve_align(custom) is custom

    def test_unknown_name(self):
        """Test unknown name."""
        with pytest.raises(InvalidConfigurationError):
            resolve_align('middle')

    def test_unknown_value(self):
        """Test out of range value."""
        with pytest.raises(InvalidConfigurationError):
            resolve_align(7)

    def test_not_callable(self):
        """Test arbitrary objects are rejected."""
        with pytest.raises(InvalidConfigurationError):
            resolve_align(1.5)
