"""2D and 3D point / vector math.

Points and vectors share one representation: an immutable value type with
x, y (and z) coordinates. The functions in this module never mutate their
arguments; every result is a fresh value.

There are two families of helpers, specialized for 2D and 3D. The caller
always knows which one it needs, so no generic dispatch is done here.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """A point or vector in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> "Vec2":
        return Vec2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Vec3:
    """A point or vector in 3D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate
    """

    x: float
    y: float
    z: float

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> "Vec3":
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, z) tuple."""
        return (self.x, self.y, self.z)


ORIGIN = Vec3(0.0, 0.0, 0.0)
Z_AXIS = Vec3(0.0, 0.0, 1.0)


def cross_product(a: Vec3, b: Vec3) -> Vec3:
    """Cross product a x b."""
    # a1b2 - a2b1, a2b0 - a0b2, a0b1 - a1b0
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def dot_product_2d(a: Vec2, b: Vec2) -> float:
    return a.x * b.x + a.y * b.y


def dot_product_3d(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def sub_points_2d(a: Vec2, b: Vec2) -> Vec2:
    """a - b"""
    return Vec2(a.x - b.x, a.y - b.y)


def sub_points_3d(a: Vec3, b: Vec3) -> Vec3:
    """a - b"""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def add_points_2d(a: Vec2, b: Vec2) -> Vec2:
    """a + b"""
    return Vec2(a.x + b.x, a.y + b.y)


def add_points_3d(a: Vec3, b: Vec3) -> Vec3:
    """a + b"""
    return Vec3(a.x + b.x, a.y + b.y, a.z + b.z)


def mul_point_2d(a: Vec2, s: float) -> Vec2:
    """a * s"""
    return Vec2(a.x * s, a.y * s)


def mul_point_3d(a: Vec3, s: float) -> Vec3:
    """a * s"""
    return Vec3(a.x * s, a.y * s, a.z * s)


def vec_mag_2d(a: Vec2) -> float:
    """|a|"""
    return math.sqrt(a.x * a.x + a.y * a.y)


def vec_mag_3d(a: Vec3) -> float:
    """|a|"""
    return math.sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


def unit_vector_2d(a: Vec2) -> Vec2:
    """a / |a|

    A zero-length vector is not guarded against.
    """
    return mul_point_2d(a, 1 / vec_mag_2d(a))


def unit_vector_3d(a: Vec3) -> Vec3:
    """a / |a|

    A zero-length vector is not guarded against.
    """
    return mul_point_3d(a, 1 / vec_mag_3d(a))


def linear_interpolate(a: float, b: float, d: float) -> float:
    """Interpolate between a (d = 0) and b (d = 1)."""
    return (b - a) * d + a


def linear_interpolate_points_3d(a: Vec3, b: Vec3, d: float) -> Vec3:
    """Interpolate between points a (d = 0) and b (d = 1)."""
    return Vec3(
        (b.x - a.x) * d + a.x,
        (b.y - a.y) * d + a.y,
        (b.z - a.z) * d + a.z,
    )


def average_points(points: Iterable[Vec3]) -> Vec3:
    """Average a list of points, returning their centroid.

    Args:
        points: Points to average (must not be empty)

    Returns:
        The unweighted average position
    """
    x = y = z = 0.0
    n = 0
    for p in points:
        x += p.x
        y += p.y
        z += p.z
        n += 1

    f = 1 / n
    return Vec3(x * f, y * f, z * f)


def push_points_2d(a: Vec2, b: Vec2, distance: float = 1.0) -> tuple[Vec2, Vec2]:
    """Push a and b away from each other.

    The distance between the returned points is larger by ``2 * distance``,
    ``distance`` in each direction along the line through a and b.

    Args:
        a: First point
        b: Second point
        distance: How far each point moves

    Returns:
        Tuple of the moved (a, b). Coincident points have no direction to be
        pushed along and are returned unchanged.
    """
    delta = sub_points_2d(b, a)
    mag = vec_mag_2d(delta)
    if mag == 0.0:
        return a, b

    vec = mul_point_2d(delta, distance / mag)
    return sub_points_2d(a, vec), add_points_2d(b, vec)
