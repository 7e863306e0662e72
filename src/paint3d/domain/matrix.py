"""Affine 3x4 matrix math.

An AffineMatrix represents an affine 4x4 matrix stored as 3x4, with the last
row implied as [0, 0, 0, 1]. This skips the homogeneous divide and the work
for the constant row. The layout is:

    e0  e1  e2  e3
    e4  e5  e6  e7
    e8  e9  e10 e11
    0   0   0   1

None of the operations here can introduce projective terms, so the implied
row holds for every matrix produced by this module.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from paint3d.domain.vector import Vec3


@dataclass(frozen=True, slots=True)
class AffineMatrix:
    """Immutable affine transformation matrix (12 coefficients)."""

    e0: float
    e1: float
    e2: float
    e3: float
    e4: float
    e5: float
    e6: float
    e7: float
    e8: float
    e9: float
    e10: float
    e11: float

    def as_rows(self) -> tuple[tuple[float, float, float, float], ...]:
        """Expand to the full 4x4 matrix, including the implied last row.

        Returns:
            Four row tuples of four coefficients each
        """
        return (
            (self.e0, self.e1, self.e2, self.e3),
            (self.e4, self.e5, self.e6, self.e7),
            (self.e8, self.e9, self.e10, self.e11),
            (0.0, 0.0, 0.0, 1.0),
        )


def multiply_affine(a: AffineMatrix, b: AffineMatrix) -> AffineMatrix:
    """Matrix multiplication a x b.

    Unrolled, and includes the calculations with the implied last row.
    """
    a0, a1, a2, a3 = a.e0, a.e1, a.e2, a.e3
    a4, a5, a6, a7 = a.e4, a.e5, a.e6, a.e7
    a8, a9, a10, a11 = a.e8, a.e9, a.e10, a.e11
    b0, b1, b2, b3 = b.e0, b.e1, b.e2, b.e3
    b4, b5, b6, b7 = b.e4, b.e5, b.e6, b.e7
    b8, b9, b10, b11 = b.e8, b.e9, b.e10, b.e11

    return AffineMatrix(
        a0 * b0 + a1 * b4 + a2 * b8,
        a0 * b1 + a1 * b5 + a2 * b9,
        a0 * b2 + a1 * b6 + a2 * b10,
        a0 * b3 + a1 * b7 + a2 * b11 + a3,
        a4 * b0 + a5 * b4 + a6 * b8,
        a4 * b1 + a5 * b5 + a6 * b9,
        a4 * b2 + a5 * b6 + a6 * b10,
        a4 * b3 + a5 * b7 + a6 * b11 + a7,
        a8 * b0 + a9 * b4 + a10 * b8,
        a8 * b1 + a9 * b5 + a10 * b9,
        a8 * b2 + a9 * b6 + a10 * b10,
        a8 * b3 + a9 * b7 + a10 * b11 + a11,
    )


def make_identity_affine() -> AffineMatrix:
    return AffineMatrix(
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
    )


def make_rotate_affine_x(theta: float) -> AffineMatrix:
    """Rotation about the x axis by theta radians."""
    s = math.sin(theta)
    c = math.cos(theta)
    return AffineMatrix(
        1.0, 0.0, 0.0, 0.0,
        0.0, c, -s, 0.0,
        0.0, s, c, 0.0,
    )


def make_rotate_affine_y(theta: float) -> AffineMatrix:
    """Rotation about the y axis by theta radians."""
    s = math.sin(theta)
    c = math.cos(theta)
    return AffineMatrix(
        c, 0.0, s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, c, 0.0,
    )


def make_rotate_affine_z(theta: float) -> AffineMatrix:
    """Rotation about the z axis by theta radians."""
    s = math.sin(theta)
    c = math.cos(theta)
    return AffineMatrix(
        c, -s, 0.0, 0.0,
        s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
    )


def make_translate_affine(dx: float, dy: float, dz: float) -> AffineMatrix:
    return AffineMatrix(
        1.0, 0.0, 0.0, dx,
        0.0, 1.0, 0.0, dy,
        0.0, 0.0, 1.0, dz,
    )


def make_scale_affine(sx: float, sy: float, sz: float) -> AffineMatrix:
    return AffineMatrix(
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
    )


def trans_adjoint(a: AffineMatrix) -> AffineMatrix:
    """Transpose of the inverse, computed via the classical adjoint.

    This skips division by the determinant, so vectors transformed by the
    result will not keep their original length. Callers normalize when they
    need unit vectors. The translation column is zero: the result is only
    meant for direction vectors such as surface normals.

    Reference: "Transformations of Surface Normal Vectors", Ken Turkowski.

    Args:
        a: Matrix used to transform points

    Returns:
        Matrix to transform normals with
    """
    a0, a1, a2 = a.e0, a.e1, a.e2
    a4, a5, a6 = a.e4, a.e5, a.e6
    a8, a9, a10 = a.e8, a.e9, a.e10
    return AffineMatrix(
        a10 * a5 - a6 * a9,
        a6 * a8 - a4 * a10,
        a4 * a9 - a8 * a5,
        0.0,
        a2 * a9 - a10 * a1,
        a10 * a0 - a2 * a8,
        a8 * a1 - a0 * a9,
        0.0,
        a6 * a1 - a2 * a5,
        a4 * a2 - a6 * a0,
        a0 * a5 - a4 * a1,
        0.0,
    )


def transform_point(t: AffineMatrix, p: Vec3) -> Vec3:
    """Transform the point p by the matrix t."""
    return Vec3(
        t.e0 * p.x + t.e1 * p.y + t.e2 * p.z + t.e3,
        t.e4 * p.x + t.e5 * p.y + t.e6 * p.z + t.e7,
        t.e8 * p.x + t.e9 * p.y + t.e10 * p.z + t.e11,
    )


def transform_points(t: AffineMatrix, points: Iterable[Vec3]) -> list[Vec3]:
    """Transform every point by t, returning a new list."""
    return [transform_point(t, p) for p in points]
