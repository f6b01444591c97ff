"""
Unit tests for mirroring a closed path across a straight edge.

Tests:
- Node count, order and closure of the merged path
- Geometric symmetry of the result
- Smooth seams at the axis nodes
- Rejection of open paths and curved edges
"""

import pytest

from mirrorpath.core import (
    NoEligiblePathError, NodeKind, NotStraightEdgeError, Path, Role,
)
from mirrorpath.core.math import cross, dist, reflect_across_line


def close_to(a, b, tol=1e-6):
    return dist(a, b) <= tol


class TestReflectAndMerge:
    """Tests for Path.reflect_and_merge on eligible paths."""

    def test_square_node_count(self, square_path):
        merged = square_path.reflect_and_merge((50, 1))
        # 2 intermediate nodes -> 2 * 2 + 2
        assert len(merged) == 6
        assert merged.closed

    def test_square_anchor_order(self, square_path):
        merged = square_path.reflect_and_merge((50, 1))
        expected = [(0, 0), (0, -100), (100, -100), (100, 0), (100, 100), (0, 100)]
        for node, anchor in zip(merged, expected):
            assert close_to(node.anchor, anchor)

    def test_symmetric_about_axis(self, square_path):
        """Segment k mirrors segment n-1-k traversed backwards."""
        merged = square_path.reflect_and_merge((50, 1))
        axis = ((0.0, 0.0), (100.0, 0.0))
        n = merged.segment_count()
        for k in range(n):
            for t in (0.0, 0.2, 0.5, 0.8, 1.0):
                mirrored = reflect_across_line(merged.point_at(k, t), *axis)
                assert close_to(mirrored, merged.point_at(n - 1 - k, 1 - t))

    def test_axis_nodes_smooth(self, square_path):
        merged = square_path.reflect_and_merge((50, 1))
        a, b = merged[0], merged[3]
        for node in (a, b):
            assert node.kind is NodeKind.SMOOTH
            assert abs(cross(node.ctrl1, node.anchor, node.ctrl2)) < 1e-6
        assert close_to(a.ctrl2, (0, -25))
        assert close_to(b.ctrl1, (100, -25))

    def test_body_kept_original(self, square_path):
        merged = square_path.reflect_and_merge((50, 1))
        assert merged[4] == square_path[2]
        assert merged[5] == square_path[3]

    def test_input_untouched(self, square_path):
        before = square_path.nodes
        square_path.reflect_and_merge((50, 1))
        assert square_path.nodes == before

    def test_pick_other_edge(self, square_path):
        """Picking the right edge mirrors across x = 100."""
        merged = square_path.reflect_and_merge((99, 50))
        assert len(merged) == 6
        anchors = [node.anchor for node in merged]
        for anchor in anchors:
            mirrored = reflect_across_line(anchor, (100, 0), (100, 100))
            assert any(close_to(mirrored, other) for other in anchors)

    def test_triangle(self):
        """A triangle has a single intermediate node: 2 * 1 + 2 nodes."""
        path = Path().append((0, 0)).append((100, 0)).append((50, 80)).close()
        merged = path.reflect_and_merge((50, -1))
        assert len(merged) == 4
        assert close_to(merged[1].anchor, (50, -80))

    def test_reflected_handles_swapped(self, square_path):
        merged = square_path.reflect_and_merge((50, 1))
        axis = ((0.0, 0.0), (100.0, 0.0))
        original = square_path[3]
        mirrored = merged[1]
        assert close_to(mirrored.ctrl1, reflect_across_line(original.ctrl2, *axis))
        assert close_to(mirrored.ctrl2, reflect_across_line(original.ctrl1, *axis))


class TestReflectAndMergeRejected:
    """Tests for the failure paths of reflect_and_merge."""

    def test_open_path(self, square_path):
        with pytest.raises(NoEligiblePathError):
            square_path.open().reflect_and_merge((50, 1))

    def test_too_few_nodes(self):
        path = Path(nodes=Path().append((0, 0)).append((100, 0)).nodes, closed=True)
        with pytest.raises(NoEligiblePathError):
            path.reflect_and_merge((50, 0))

    def test_curved_edge(self):
        path = (
            Path().append((0, 0)).append((100, 0)).append((50, 80)).close()
            .move_handle(0, Role.CTRL2, (25, 30))
        )
        picked = path.point_at(0, 0.5)
        with pytest.raises(NotStraightEdgeError) as info:
            path.reflect_and_merge(picked)
        assert info.value.segment_index == 0

    def test_curved_incoming_handle(self, square_path):
        """The end node's incoming handle must also lie on the edge."""
        path = square_path.move_handle(1, Role.CTRL1, (75, 0.5))
        with pytest.raises(NotStraightEdgeError):
            path.reflect_and_merge((50, 1))
