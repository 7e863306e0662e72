"""Builders and helpers for Paths."""

from paint3d.domain import Curve, Path, Vec3
from paint3d.domain.vector import ORIGIN

# Control point offset for a circle made of 2 cubic curves. Each curve is a
# half circle of radius 0.5, where the offset is 4/3 * r.
# http://www.whizkidtech.redprince.net/bezier/circle/
# http://www.tinaja.com/glib/ellipse4.pdf
CIRCLE_KAPPA = 0.66666666666


def make_line(p0: Vec3, p1: Vec3) -> Path:
    """Make a line (a straight cubic bezier curve) from p0 to p1."""
    return Path(points=[p0, p1], curves=[Curve(1, 1, 1)], starting_point=0)


def make_circle(kappa: float = CIRCLE_KAPPA) -> Path:
    """Make a circle from (0, 0, 0) through (1, 0, 0) and back.

    The path has no starting point, so it is traced from the origin, which is
    also the end point of the second curve.

    Args:
        kappa: Control point offset of the two half circle curves

    Returns:
        Path of 6 points and 2 cubic curves
    """
    points = [
        Vec3(0.0, kappa, 0.0),
        Vec3(1.0, kappa, 0.0),
        Vec3(1.0, 0.0, 0.0),
        Vec3(1.0, -kappa, 0.0),
        Vec3(0.0, -kappa, 0.0),
        Vec3(0.0, 0.0, 0.0),
    ]
    curves = [Curve(2, 0, 1), Curve(5, 3, 4)]
    return Path(points=points, curves=curves)


def make_spiral(count: int, kappa: float = CIRCLE_KAPPA) -> Path:
    """Make a spiral of count rings, each moving -0.1 along the z axis."""
    points: list[Vec3] = []
    curves: list[Curve] = []

    z = 0.0
    p = 0
    for _ in range(count):
        points.append(Vec3(0.0, kappa, z))
        z -= 0.05
        points.append(Vec3(1.0, kappa, z))
        points.append(Vec3(1.0, 0.0, z))
        points.append(Vec3(1.0, -kappa, z))
        z -= 0.05
        points.append(Vec3(0.0, -kappa, z))
        points.append(Vec3(0.0, 0.0, z))
        curves.append(Curve(p + 2, p + 0, p + 1))
        curves.append(Curve(p + 5, p + 3, p + 4))
        p += 6

    return Path(points=points, curves=curves)


def fit_quadratic_to_points(p0: Vec3, p1: Vec3, p2: Vec3) -> Vec3:
    """Fit a quadratic bezier curve evenly through 3 points.

    Returns the control point of the quadratic curve with end points p0 and
    p2 that passes through p1 at t = 0.5.
    """
    return Vec3(
        p1.x + p1.x - 0.5 * (p0.x + p2.x),
        p1.y + p1.y - 0.5 * (p0.y + p2.y),
        p1.z + p1.z - 0.5 * (p0.z + p2.z),
    )


def evaluate_curve(path: Path, start: int | None, curve: Curve, t: float) -> Vec3:
    """Evaluate a curve of path at parameter t.

    Args:
        path: Path owning the curve
        start: Index of the curve's start point, None for the origin
        curve: Curve to evaluate
        t: Parameter in [0, 1]

    Returns:
        Point on the curve
    """
    pts = path.points
    p0 = ORIGIN if start is None else pts[start]
    mt = 1 - t
    if curve.c1 is None:
        c0, ep = pts[curve.c0], pts[curve.ep]
        return p0 * (mt * mt) + c0 * (2 * mt * t) + ep * (t * t)

    c0, c1, ep = pts[curve.c0], pts[curve.c1], pts[curve.ep]
    return (
        p0 * (mt * mt * mt)
        + c0 * (3 * mt * mt * t)
        + c1 * (3 * mt * t * t)
        + ep * (t * t * t)
    )
