from __future__ import annotations

import math

from .types import Edge, Point, PositionedNode, RoutedEdge

# ============================================================================
# Connector geometry -- anchors and cubic Bezier sampling
#
# Every connector leaves the right-hand side of the source box and enters the
# left-hand side of the target box, both at mid-height. Sides never flip, so
# a target placed left of its source produces a looping curve.
# ============================================================================

# Emitted for edges whose endpoints have no position
PLACEHOLDER_PATH: list[tuple[float, float]] = [(0.0, 0.0), (0.0, 0.0)]


def center_to_top_left(cx: float, cy: float, width: float, height: float) -> Point:
    """Convert center-based coordinates to top-left origin."""
    return Point(x=cx - width / 2, y=cy - height / 2)


def source_anchor(x: float, y: float, width: float, height: float) -> Point:
    """Midpoint of the right edge of a box with top-left (x, y)."""
    return Point(x=x + width, y=y + height / 2)


def target_anchor(x: float, y: float, width: float, height: float) -> Point:
    """Midpoint of the left edge of a box with top-left (x, y)."""
    return Point(x=x, y=y + height / 2)


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3."""
    mt = 1 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    return Point(
        x=a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        y=a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def control_offset(start: Point, end: Point, opts: dict) -> float:
    """Horizontal handle length, proportional to anchor distance and clamped."""
    dist = math.hypot(end.x - start.x, end.y - start.y)
    return min(
        max(dist * opts["curve_factor"], opts["curve_min_offset"]),
        opts["curve_max_offset"],
    )


def sample_bezier(start: Point, end: Point, opts: dict) -> list[tuple[float, float]]:
    """Sample an S-curve from `start` heading right to `end` arriving from the left."""
    offset = control_offset(start, end, opts)
    c1 = Point(x=start.x + offset, y=start.y)
    c2 = Point(x=end.x - offset, y=end.y)

    segments = max(int(opts["curve_segments"]), 1)
    path: list[tuple[float, float]] = [(start.x, start.y)]
    for i in range(1, segments):
        p = cubic_bezier(start, c1, c2, end, i / segments)
        path.append((p.x, p.y))
    # Exact end point, not the t=1 evaluation
    path.append((end.x, end.y))
    return path


def compute_paths(
    edges: list[Edge],
    positions: list[PositionedNode],
    dimensions: dict[str, tuple[float, float]],
    opts: dict,
) -> list[RoutedEdge]:
    """Route every edge between its tables' final positions.

    `dimensions` maps node id to (width, height). Edges with an endpoint
    missing from either map get a zero-length placeholder path.
    """
    pos_lookup = {p.id: p for p in positions}

    routed: list[RoutedEdge] = []
    for edge in edges:
        src = pos_lookup.get(edge.source)
        tgt = pos_lookup.get(edge.target)
        src_size = dimensions.get(edge.source)
        tgt_size = dimensions.get(edge.target)

        if src is None or tgt is None or src_size is None or tgt_size is None:
            routed.append(
                RoutedEdge(source=edge.source, target=edge.target, path=list(PLACEHOLDER_PATH))
            )
            continue

        start = source_anchor(src.x, src.y, src_size[0], src_size[1])
        end = target_anchor(tgt.x, tgt.y, tgt_size[0], tgt_size[1])
        routed.append(
            RoutedEdge(
                source=edge.source,
                target=edge.target,
                path=sample_bezier(start, end, opts),
            )
        )

    return routed
