"""Tests for connector routing -- anchors, Bezier sampling and placeholders."""
from __future__ import annotations

import pytest

from erd_layout.paths import (
    PLACEHOLDER_PATH,
    compute_paths,
    control_offset,
    cubic_bezier,
    sample_bezier,
    source_anchor,
    target_anchor,
)
from erd_layout.settings import merge_options
from erd_layout.types import Edge, Point, PositionedNode, LayoutOptions

OPTS = merge_options(None)

DIMENSIONS = {
    "users": (240, 100),
    "orders": (240, 150),
}

POSITIONS = [
    PositionedNode(id="users", x=0, y=0),
    PositionedNode(id="orders", x=400, y=200),
]


class TestAnchors:
    def test_source_anchor_is_right_mid(self):
        assert source_anchor(10, 20, 240, 100) == Point(x=250, y=70)

    def test_target_anchor_is_left_mid(self):
        assert target_anchor(10, 20, 240, 100) == Point(x=10, y=70)


class TestBezier:
    def test_endpoints_of_the_curve(self):
        p0, p1, p2, p3 = Point(0, 0), Point(10, 0), Point(20, 30), Point(40, 30)
        assert cubic_bezier(p0, p1, p2, p3, 0) == Point(x=0, y=0)
        end = cubic_bezier(p0, p1, p2, p3, 1)
        assert (end.x, end.y) == (pytest.approx(40), pytest.approx(30))

    @pytest.mark.parametrize("length, expected", [
        (100, 40),    # 30 clamped up
        (200, 60),
        (400, 120),
        (1000, 120),  # 300 clamped down
    ])
    def test_control_offset_is_clamped(self, length, expected):
        offset = control_offset(Point(0, 0), Point(length, 0), OPTS)
        assert offset == pytest.approx(expected)

    def test_sample_count_matches_segments(self):
        path = sample_bezier(Point(0, 0), Point(300, 100), OPTS)
        assert len(path) == 21

    def test_custom_segment_count(self):
        opts = merge_options(LayoutOptions(curve_segments=4))
        path = sample_bezier(Point(0, 0), Point(300, 100), opts)
        assert len(path) == 5

    def test_first_and_last_points_are_exact(self):
        path = sample_bezier(Point(1.5, 2.5), Point(333.3, 99.9), OPTS)
        assert path[0] == (1.5, 2.5)
        assert path[-1] == (333.3, 99.9)

    def test_curve_leaves_and_arrives_horizontally(self):
        path = sample_bezier(Point(0, 0), Point(400, 200), OPTS)
        # Near the ends the curve moves mostly along x
        dx0, dy0 = path[1][0] - path[0][0], path[1][1] - path[0][1]
        dx1, dy1 = path[-1][0] - path[-2][0], path[-1][1] - path[-2][1]
        assert abs(dx0) > abs(dy0)
        assert abs(dx1) > abs(dy1)


class TestComputePaths:
    def test_routes_from_right_mid_to_left_mid(self):
        routed = compute_paths([Edge("users", "orders")], POSITIONS, DIMENSIONS, OPTS)
        assert len(routed) == 1
        path = routed[0].path
        assert path[0] == (240, 50)
        assert path[-1] == (400, 275)

    def test_midpoint_of_symmetric_curve(self):
        routed = compute_paths([Edge("users", "orders")], POSITIONS, DIMENSIONS, OPTS)
        mid = routed[0].path[10]
        assert mid == (pytest.approx(320), pytest.approx(162.5))

    def test_keeps_edge_identity_and_order(self):
        edges = [Edge("orders", "users"), Edge("users", "orders")]
        routed = compute_paths(edges, POSITIONS, DIMENSIONS, OPTS)
        assert [(r.source, r.target) for r in routed] == [
            ("orders", "users"),
            ("users", "orders"),
        ]

    def test_parallel_edges_are_routed_independently(self):
        edges = [Edge("users", "orders"), Edge("users", "orders")]
        routed = compute_paths(edges, POSITIONS, DIMENSIONS, OPTS)
        assert len(routed) == 2
        assert routed[0] is not routed[1]

    def test_missing_endpoint_gets_placeholder(self):
        routed = compute_paths([Edge("users", "ghost")], POSITIONS, DIMENSIONS, OPTS)
        assert routed[0].path == PLACEHOLDER_PATH
        assert len(routed[0].path) >= 2

    def test_missing_dimensions_gets_placeholder(self):
        routed = compute_paths([Edge("users", "orders")], POSITIONS, {"users": (240, 100)}, OPTS)
        assert routed[0].path == PLACEHOLDER_PATH

    def test_placeholder_is_not_shared(self):
        routed = compute_paths([Edge("a", "b")], [], {}, OPTS)
        routed[0].path.append((1.0, 1.0))
        assert PLACEHOLDER_PATH == [(0.0, 0.0), (0.0, 0.0)]

    def test_self_reference_loops_between_its_own_sides(self):
        routed = compute_paths(
            [Edge("users", "users")], POSITIONS, DIMENSIONS, OPTS
        )
        path = routed[0].path
        assert path[0] == (240, 50)
        assert path[-1] == (0, 50)
        # Handles push outward past both sides
        assert max(x for x, _ in path) > 240
        assert min(x for x, _ in path) < 0

    def test_no_edges(self):
        assert compute_paths([], POSITIONS, DIMENSIONS, OPTS) == []
