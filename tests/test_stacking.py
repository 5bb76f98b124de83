"""Tests for link stacking."""

import pytest
from sankeylayout.graph import Node, Link, resolve_graph, link_nodes
from sankeylayout.stacking import (
    reorder_node_links, reorder_links, target_top, source_top, compute_link_breadths
)


@pytest.fixture
def stacks():
    """S feeds T1 and T2; X also feeds T2, stacked above S's link."""
    s, x, t1, t2 = Node('S'), Node('X'), Node('T1'), Node('T2')
    x_t2 = Link('X', 'T2', 1)
    s_t1 = Link('S', 'T1', 1)
    s_t2 = Link('S', 'T2', 2)
    nodes = [s, x, t1, t2]
    links = [x_t2, s_t1, s_t2]
    link_nodes(nodes, links, resolve_graph(nodes, links))

    s.y0 = 100.0
    t1.y0 = 0.0
    t2.y0 = 50.0
    s_t1.width = 10.0
    s_t2.width = 20.0
    x_t2.width = 7.0
    return {'S': s, 'X': x, 'T1': t1, 'T2': t2, 'x_t2': x_t2, 's_t1': s_t1, 's_t2': s_t2}


class TestTargetTop:
    """Test ideal target position."""

    def test_first_slot(self, stacks):
        """Test link at the top of both stacks."""
        assert target_top(stacks['S'], stacks['T1'], 4) == pytest.approx(98)

    def test_lower_slot(self, stacks):
        """Test link below one outgoing and one incoming neighbour."""
        # 100 - 2 + (10 + 4) - 7
        assert target_top(stacks['S'], stacks['T2'], 4) == pytest.approx(105)

    def test_no_padding(self, stacks):
        """Test without padding only widths count."""
        assert target_top(stacks['S'], stacks['T2'], 0) == pytest.approx(103)


class TestSourceTop:
    """Test ideal source position."""

    def test_lower_slot(self, stacks):
        """Test mirror image of target_top."""
        # 50 - 2 + (7 + 4) - 10
        assert source_top(stacks['S'], stacks['T2'], 4) == pytest.approx(49)

    def test_first_slot(self, stacks):
        """Test single incoming link."""
        assert source_top(stacks['S'], stacks['T1'], 4) == pytest.approx(0)


class TestReorder:
    """Test stack ordering."""

    def test_by_neighbour_position(self, stacks):
        """Test incoming links follow their sources."""
        t2 = stacks['T2']
        stacks['X'].y0 = 200.0
        reorder_node_links(t2)
        assert t2.target_links == [stacks['s_t2'], stacks['x_t2']]

    def test_tie_broken_by_index(self, stacks):
        """Test equal positions fall back to link index."""
        t2 = stacks['T2']
        stacks['X'].y0 = stacks['S'].y0
        t2.target_links.reverse()
        reorder_node_links(t2)
        assert t2.target_links == [stacks['x_t2'], stacks['s_t2']]

    def test_outgoing_by_target(self, stacks):
        """Test outgoing links follow their targets."""
        s = stacks['S']
        stacks['T1'].y0 = 80.0
        reorder_links([s])
        assert s.source_links == [stacks['s_t2'], stacks['s_t1']]


class TestComputeLinkBreadths:
    """Test final link offsets."""

    def test_offsets(self, stacks):
        """Test links are centred in consecutive bands."""
        compute_link_breadths([stacks[k] for k in ('S', 'X', 'T1', 'T2')])

        assert stacks['s_t1'].y0 == pytest.approx(105)
        assert stacks['s_t2'].y0 == pytest.approx(120)
        assert stacks['s_t1'].y1 == pytest.approx(5)
        assert stacks['x_t2'].y1 == pytest.approx(53.5)
        assert stacks['s_t2'].y1 == pytest.approx(67)
