"""Tests for border anchoring and arrow geometry."""

import math

import pytest

from shapedraw import Node, Point, compute_arrow_path, compute_border_point
from shapedraw.geometry import contains_point, node_center


@pytest.fixture
def wide_node():
    # Center (150, 125), aspect ratio 2.
    return Node(id="node_0", x=100.0, y=100.0, width=100.0, height=50.0)


class TestBorderPoint:
    def test_straight_right_hits_right_edge_midpoint(self, wide_node):
        assert compute_border_point(wide_node, 300.0, 125.0) == Point(200.0, 125.0)

    def test_straight_down_hits_bottom_edge_midpoint(self, wide_node):
        assert compute_border_point(wide_node, 150.0, 225.0) == Point(150.0, 150.0)

    def test_straight_left_and_up(self, wide_node):
        assert compute_border_point(wide_node, 0.0, 125.0) == Point(100.0, 125.0)
        assert compute_border_point(wide_node, 150.0, -40.0) == Point(150.0, 100.0)

    def test_shallow_ray_exits_vertical_edge(self, wide_node):
        # |dx/dy| = 100/25 = 4 > 2, so the right edge is crossed.
        point = compute_border_point(wide_node, 250.0, 150.0)
        assert point.x == pytest.approx(200.0)
        assert point.y == pytest.approx(137.5)

    def test_steep_ray_exits_horizontal_edge(self, wide_node):
        # |dx/dy| = 25/100 < 2, so the bottom edge is crossed.
        point = compute_border_point(wide_node, 175.0, 225.0)
        assert point.x == pytest.approx(156.25)
        assert point.y == pytest.approx(150.0)

    def test_ray_through_corner(self, wide_node):
        point = compute_border_point(wide_node, 250.0, 175.0)
        assert point.x == pytest.approx(200.0)
        assert point.y == pytest.approx(150.0)

    def test_target_inside_node_still_projects_to_border(self, wide_node):
        point = compute_border_point(wide_node, 160.0, 125.0)
        assert point == Point(200.0, 125.0)

    def test_target_at_center_falls_back_to_right_edge(self, wide_node):
        assert compute_border_point(wide_node, 150.0, 125.0) == Point(200.0, 125.0)

    def test_result_lies_on_border(self, wide_node):
        for target in [(400.0, -300.0), (-20.0, 130.0), (151.0, 500.0), (10.0, 10.0)]:
            point = compute_border_point(wide_node, *target)
            on_vertical = math.isclose(point.x, 100.0) or math.isclose(point.x, 200.0)
            on_horizontal = math.isclose(point.y, 100.0) or math.isclose(point.y, 150.0)
            assert on_vertical or on_horizontal
            assert 100.0 - 1e-9 <= point.x <= 200.0 + 1e-9
            assert 100.0 - 1e-9 <= point.y <= 150.0 + 1e-9


class TestArrowPath:
    def test_shaft_spans_endpoints(self):
        path = compute_arrow_path(0.0, 0.0, 100.0, 0.0)
        assert path.shaft.start == Point(0.0, 0.0)
        assert path.shaft.end == Point(100.0, 0.0)

    def test_heads_start_at_tip_with_fixed_length(self):
        path = compute_arrow_path(0.0, 0.0, 100.0, 0.0)
        for head in (path.head_left, path.head_right):
            assert head.start == Point(100.0, 0.0)
            length = math.hypot(head.end.x - head.start.x, head.end.y - head.start.y)
            assert length == pytest.approx(10.0)

    def test_heads_spread_thirty_degrees(self):
        path = compute_arrow_path(0.0, 0.0, 100.0, 0.0)
        offset = 10.0 * math.cos(math.radians(30))
        spread = 10.0 * math.sin(math.radians(30))
        assert path.head_left.end.x == pytest.approx(100.0 - offset)
        assert path.head_left.end.y == pytest.approx(spread)
        assert path.head_right.end.x == pytest.approx(100.0 - offset)
        assert path.head_right.end.y == pytest.approx(-spread)

    def test_head_length_independent_of_shaft(self):
        short = compute_arrow_path(0.0, 0.0, 3.0, 4.0)
        long = compute_arrow_path(0.0, 0.0, 300.0, 400.0)
        for path in (short, long):
            head = path.head_left
            assert math.hypot(head.end.x - head.start.x, head.end.y - head.start.y) == pytest.approx(10.0)

    def test_zero_length_shaft(self):
        path = compute_arrow_path(5.0, 5.0, 5.0, 5.0)
        assert path.shaft.start == path.shaft.end
        assert path.head_left.end.x == pytest.approx(5.0 - 10.0 * math.cos(math.radians(30)))


class TestHelpers:
    def test_node_center(self, wide_node):
        assert node_center(wide_node) == Point(150.0, 125.0)

    def test_contains_point_is_closed(self, wide_node):
        assert contains_point(wide_node, 100.0, 100.0)
        assert contains_point(wide_node, 200.0, 150.0)
        assert not contains_point(wide_node, 200.1, 150.0)
