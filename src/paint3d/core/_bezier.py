"""Internal Bezier curve flattening algorithms.

This is an internal module used by raster surfaces to turn curve segments
into polylines. Not intended for public use.
"""

import math

from paint3d.domain import Vec2

# Guards against unbounded recursion on non-finite input.
_MAX_DEPTH = 16


def _mid(a: Vec2, b: Vec2) -> Vec2:
    return Vec2((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Vec2], tolerance: float, depth: int = 0) -> list[Vec2]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve, in pixels
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both end points
    """
    p0, p1, p2 = points

    # Curve midpoint (t = 0.5) against the chord midpoint
    curve_mid = Vec2(0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x, 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y)
    chord_mid = _mid(p0, p2)

    distance = math.hypot(curve_mid.x - chord_mid.x, curve_mid.y - chord_mid.y)

    if not distance > tolerance or depth >= _MAX_DEPTH:
        return [p0, p2]

    left = flatten_quadratic([p0, _mid(p0, p1), curve_mid], tolerance, depth + 1)
    right = flatten_quadratic([curve_mid, _mid(p1, p2), p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Vec2], tolerance: float, depth: int = 0) -> list[Vec2]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve, in pixels
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both end points
    """
    p0, p1, p2, p3 = points

    # First level
    q1 = _mid(p0, p1)
    q2 = _mid(p1, p2)
    q3 = _mid(p2, p3)

    # Second level
    r1 = _mid(q1, q2)
    r2 = _mid(q2, q3)

    # Third level (curve point at t = 0.5)
    mid = _mid(r1, r2)

    # Control points against the chord at 1/3 and 2/3, which also catches
    # S-shaped curves whose midpoint lies on the chord.
    dx = p3.x - p0.x
    dy = p3.y - p0.y
    distance = max(
        math.hypot(p1.x - (p0.x + dx / 3), p1.y - (p0.y + dy / 3)),
        math.hypot(p2.x - (p0.x + 2 * dx / 3), p2.y - (p0.y + 2 * dy / 3)),
    )

    if not distance > tolerance or depth >= _MAX_DEPTH:
        return [p0, p3]

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
