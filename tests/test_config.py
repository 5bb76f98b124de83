"""Tests for layout settings."""

import math

import pytest
from sankeylayout.align import Align, sankey_center, sankey_justify
from sankeylayout.config import LayoutConfig
from sankeylayout.errors import InvalidConfigurationError


class TestLayoutConfig:
    """Test LayoutConfig validation."""

    def test_defaults(self):
        """Test d3-sankey defaults."""
        config = LayoutConfig()
        assert (config.x0, config.y0, config.x1, config.y1) == (0.0, 0.0, 1.0, 1.0)
        assert config.node_width == 24.0
        assert config.node_padding == 8.0
        assert config.iterations == 6
        assert config.align is sankey_justify
        assert config.node_sort is None
        assert config.link_sort is None

    def test_align_resolved(self):
        """Test alignment names are resolved to functions."""
        config = LayoutConfig(x1=100, y1=100, align='center')
        assert config.align is sankey_center
        assert LayoutConfig(x1=100, y1=100, align=Align.center).align is sankey_center

    def test_size_properties(self):
        """Test width and height helpers."""
        config = LayoutConfig(x0=10, y0=20, x1=110, y1=70, node_width=5)
        assert config.width == 100
        assert config.height == 50

    def test_frozen(self):
        """Test settings cannot be changed."""
        config = LayoutConfig(x1=100, y1=100)
        with pytest.raises(AttributeError):
            config.node_padding = 3

    def test_with_padding(self):
        """Test with_padding returns a copy."""
        config = LayoutConfig(x1=100, y1=100, node_padding=10)
        smaller = config.with_padding(4)
        assert smaller.node_padding == 4
        assert config.node_padding == 10
        assert smaller.align is config.align

    @pytest.mark.parametrize('kwargs', [
        dict(x0=10, x1=10, y1=100),
        dict(x0=10, x1=5, y1=100),
        dict(x1=100, y0=50, y1=0),
        dict(x1=100, y1=math.nan),
        dict(x1=100, y1=100, node_width=0),
        dict(x1=100, y1=100, node_width=-1),
        dict(x1=100, y1=100, node_padding=-1),
        dict(x1=100, y1=100, node_padding=math.inf),
        dict(x1=100, y1=100, iterations=-1),
        dict(x1=100, y1=100, iterations=2.5),
        dict(x1=100, y1=100, align='sideways'),
    ])
    def test_invalid(self, kwargs):
        """Test degenerate settings are rejected."""
        with pytest.raises(InvalidConfigurationError):
            LayoutConfig(**kwargs)

    def test_zero_iterations_allowed(self):
        """Test relaxation may be switched off."""
        assert LayoutConfig(x1=100, y1=100, iterations=0).iterations == 0

    def test_node_width_may_exceed_extent(self):
        """Test a node width wider than the extent is accepted, as the defaults need."""
        config = LayoutConfig(x1=100, y1=100, node_width=101)
        assert config.node_width == 101
