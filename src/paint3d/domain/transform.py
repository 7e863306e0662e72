"""Mutable transform wrapper around an AffineMatrix."""

from paint3d.domain.matrix import (
    AffineMatrix,
    make_identity_affine,
    make_rotate_affine_x,
    make_rotate_affine_y,
    make_rotate_affine_z,
    make_scale_affine,
    make_translate_affine,
    multiply_affine,
    transform_point,
)
from paint3d.domain.vector import Vec3


class Transform:
    """A convenient, mutable wrapper around one AffineMatrix.

    This is what is exposed for most transforms (camera, object, etc).

    Composition order matters. The plain operations (``rotate_x``,
    ``translate``, ...) multiply the new operation on the left, so it is
    applied after everything already in the transform. The ``*_pre`` variants
    multiply on the right, so the new operation is applied first, in the
    object's local space.

    Example:
        t = Transform()
        t.rotate_y(math.pi / 4)
        t.translate(0, 0, -5)
        p = t.transform_point(Vec3(1, 0, 0))
    """

    __slots__ = ("m",)

    def __init__(self, m: AffineMatrix | None = None) -> None:
        self.m = m if m is not None else make_identity_affine()

    def __repr__(self) -> str:
        return f"Transform({self.m!r})"

    def reset(self) -> None:
        """Reset to the identity matrix."""
        self.m = make_identity_affine()

    def rotate_x(self, theta: float) -> None:
        self.m = multiply_affine(make_rotate_affine_x(theta), self.m)

    def rotate_x_pre(self, theta: float) -> None:
        self.m = multiply_affine(self.m, make_rotate_affine_x(theta))

    def rotate_y(self, theta: float) -> None:
        self.m = multiply_affine(make_rotate_affine_y(theta), self.m)

    def rotate_y_pre(self, theta: float) -> None:
        self.m = multiply_affine(self.m, make_rotate_affine_y(theta))

    def rotate_z(self, theta: float) -> None:
        self.m = multiply_affine(make_rotate_affine_z(theta), self.m)

    def rotate_z_pre(self, theta: float) -> None:
        self.m = multiply_affine(self.m, make_rotate_affine_z(theta))

    def translate(self, dx: float, dy: float, dz: float) -> None:
        self.m = multiply_affine(make_translate_affine(dx, dy, dz), self.m)

    def translate_pre(self, dx: float, dy: float, dz: float) -> None:
        self.m = multiply_affine(self.m, make_translate_affine(dx, dy, dz))

    def scale(self, sx: float, sy: float, sz: float) -> None:
        self.m = multiply_affine(make_scale_affine(sx, sy, sz), self.m)

    def scale_pre(self, sx: float, sy: float, sz: float) -> None:
        self.m = multiply_affine(self.m, make_scale_affine(sx, sy, sz))

    def transform_point(self, p: Vec3) -> Vec3:
        return transform_point(self.m, p)

    def mult_transform(self, t: "Transform") -> None:
        """Post-multiply by another transform (self = self x t)."""
        self.m = multiply_affine(self.m, t.m)

    def set_dcm(self, u: Vec3, v: Vec3, w: Vec3) -> None:
        """Set the rotation block from three axes (direction cosine matrix).

        The axes become the first, second and third columns. Translation is
        left untouched.

        Args:
            u: New x axis
            v: New y axis
            w: New z axis
        """
        m = self.m
        self.m = AffineMatrix(
            u.x, v.x, w.x, m.e3,
            u.y, v.y, w.y, m.e7,
            u.z, v.z, w.z, m.e11,
        )

    def dup(self) -> "Transform":
        """Return an independent copy of this transform."""
        # AffineMatrix is immutable, so sharing it is a copy.
        return Transform(self.m)
