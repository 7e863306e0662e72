"""Tests for domain models to verify they work correctly."""

import math

import pytest

from paint3d.domain import (
    RGBA,
    AffineMatrix,
    Camera,
    Curve,
    Path,
    QuadFace,
    Shape,
    TextureInfo,
    Transform,
    Vec2,
    Vec3,
)
from paint3d.domain.matrix import (
    make_identity_affine,
    make_rotate_affine_x,
    make_scale_affine,
    make_translate_affine,
    multiply_affine,
    trans_adjoint,
    transform_point,
    transform_points,
)
from paint3d.domain.vector import (
    average_points,
    cross_product,
    dot_product_2d,
    dot_product_3d,
    linear_interpolate,
    linear_interpolate_points_3d,
    push_points_2d,
    unit_vector_2d,
    unit_vector_3d,
    vec_mag_3d,
)


def assert_vec3_close(a: Vec3, b: Vec3, abs_tol: float = 1e-9) -> None:
    assert a.x == pytest.approx(b.x, abs=abs_tol)
    assert a.y == pytest.approx(b.y, abs=abs_tol)
    assert a.z == pytest.approx(b.z, abs=abs_tol)


def assert_matrix_close(a: AffineMatrix, b: AffineMatrix, abs_tol: float = 1e-9) -> None:
    for row_a, row_b in zip(a.as_rows(), b.as_rows()):
        assert row_a == pytest.approx(row_b, abs=abs_tol)


class TestVectors:
    """Tests for Vec2 / Vec3 and the vector helpers."""

    def test_vec3_immutable(self) -> None:
        """Test that points are immutable values."""
        p = Vec3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            p.x = 5.0  # type: ignore

    def test_operators(self) -> None:
        """Test arithmetic operators return new values."""
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        assert a + b == Vec3(5.0, 7.0, 9.0)
        assert b - a == Vec3(3.0, 3.0, 3.0)
        assert a * 2 == Vec3(2.0, 4.0, 6.0)
        assert 2 * a == Vec3(2.0, 4.0, 6.0)
        assert -a == Vec3(-1.0, -2.0, -3.0)
        assert a == Vec3(1.0, 2.0, 3.0)

    def test_cross_product_of_axes(self) -> None:
        """Test x cross y is z."""
        assert cross_product(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert cross_product(Vec3(0, 1, 0), Vec3(1, 0, 0)) == Vec3(0, 0, -1)

    def test_dot_products(self) -> None:
        """Test 2D and 3D dot products."""
        assert dot_product_2d(Vec2(1, 2), Vec2(3, 4)) == 11
        assert dot_product_3d(Vec3(1, 2, 3), Vec3(4, 5, 6)) == 32

    def test_unit_vectors(self) -> None:
        """Test normalizing to length 1."""
        assert_vec3_close(unit_vector_3d(Vec3(0, 3, 4)), Vec3(0, 0.6, 0.8))
        u = unit_vector_2d(Vec2(3, 4))
        assert u.to_tuple() == pytest.approx((0.6, 0.8))
        assert vec_mag_3d(unit_vector_3d(Vec3(1, 2, 3))) == pytest.approx(1.0)

    def test_unit_vector_of_zero_fails(self) -> None:
        """Test a zero length vector is not silently normalized."""
        with pytest.raises(ZeroDivisionError):
            unit_vector_3d(Vec3(0, 0, 0))

    def test_linear_interpolate(self) -> None:
        """Test interpolation end points and midpoint."""
        assert linear_interpolate(2.0, 4.0, 0.0) == 2.0
        assert linear_interpolate(2.0, 4.0, 1.0) == 4.0
        assert linear_interpolate(2.0, 4.0, 0.5) == 3.0
        mid = linear_interpolate_points_3d(Vec3(0, 0, 0), Vec3(2, 4, 6), 0.5)
        assert mid == Vec3(1, 2, 3)

    def test_average_points(self) -> None:
        """Test the centroid of a square."""
        pts = [Vec3(0, 0, 0), Vec3(2, 0, 0), Vec3(2, 2, 0), Vec3(0, 2, 0)]
        assert average_points(pts) == Vec3(1, 1, 0)

    def test_push_points_2d(self) -> None:
        """Test points are pushed apart along their line."""
        a, b = push_points_2d(Vec2(0, 0), Vec2(2, 0))
        assert a == Vec2(-1, 0)
        assert b == Vec2(3, 0)

    def test_push_coincident_points(self) -> None:
        """Test coincident points have no direction and stay put."""
        p = Vec2(5, 5)
        assert push_points_2d(p, p) == (p, p)


class TestAffineMatrix:
    """Tests for the affine matrix helpers."""

    def test_last_row_is_implied(self) -> None:
        """Test every produced matrix has the constant last row."""
        m = multiply_affine(
            make_translate_affine(1, 2, 3),
            multiply_affine(make_rotate_affine_x(0.7), make_scale_affine(2, 3, 4)),
        )
        assert m.as_rows()[3] == (0.0, 0.0, 0.0, 1.0)

    def test_identity_is_neutral(self) -> None:
        """Test multiplying by identity changes nothing."""
        m = multiply_affine(make_rotate_affine_x(0.3), make_translate_affine(1, 2, 3))
        assert_matrix_close(multiply_affine(m, make_identity_affine()), m)
        assert_matrix_close(multiply_affine(make_identity_affine(), m), m)

    def test_multiply_order(self) -> None:
        """Test a x b applies b first."""
        m = multiply_affine(make_translate_affine(1, 0, 0), make_scale_affine(2, 2, 2))
        assert transform_point(m, Vec3(1, 1, 1)) == Vec3(3, 2, 2)

    def test_trans_adjoint_of_identity(self) -> None:
        """Test the normal matrix of identity is identity."""
        assert_matrix_close(trans_adjoint(make_identity_affine()), make_identity_affine())

    def test_trans_adjoint_drops_translation(self) -> None:
        """Test normals are not translated."""
        tn = trans_adjoint(make_translate_affine(5, 6, 7))
        assert transform_point(tn, Vec3(0, 0, 1)) == Vec3(0, 0, 1)

    def test_trans_adjoint_keeps_normals_perpendicular(self) -> None:
        """Test a non-uniform scale keeps transformed normals perpendicular."""
        m = make_scale_affine(1, 4, 1)
        # The plane x + y = 0 has normal (1, 1, 0) and contains (1, -1, 0).
        tangent = transform_point(m, Vec3(1, -1, 0))
        normal = transform_point(trans_adjoint(m), Vec3(1, 1, 0))
        assert dot_product_3d(tangent, normal) == pytest.approx(0.0)

    def test_transform_points_returns_new_list(self) -> None:
        """Test transforming a list does not touch the input."""
        pts = [Vec3(0, 0, 0), Vec3(1, 0, 0)]
        out = transform_points(make_translate_affine(0, 1, 0), pts)
        assert out == [Vec3(0, 1, 0), Vec3(1, 1, 0)]
        assert pts == [Vec3(0, 0, 0), Vec3(1, 0, 0)]


class TestTransform:
    """Tests for the mutable Transform wrapper."""

    def test_rotate_round_trip(self) -> None:
        """Test rotating by theta and back is the identity."""
        t = Transform()
        t.rotate_x(0.4)
        t.rotate_y(-1.1)
        t.rotate_z(2.5)
        t.rotate_z(-2.5)
        t.rotate_y(1.1)
        t.rotate_x(-0.4)
        assert_matrix_close(t.m, make_identity_affine())

    def test_post_and_pre_multiply_order(self) -> None:
        """Test plain operations apply last and pre variants apply first."""
        post = Transform()
        post.rotate_z(math.pi / 2)
        post.translate(1, 0, 0)
        assert_vec3_close(post.transform_point(Vec3(0, 0, 0)), Vec3(1, 0, 0))

        pre = Transform()
        pre.rotate_z(math.pi / 2)
        pre.translate_pre(1, 0, 0)
        assert_vec3_close(pre.transform_point(Vec3(0, 0, 0)), Vec3(0, 1, 0))

    def test_scale_pre(self) -> None:
        """Test scale_pre scales in local space."""
        t = Transform()
        t.translate(10, 0, 0)
        t.scale_pre(2, 2, 2)
        assert t.transform_point(Vec3(1, 1, 1)) == Vec3(12, 2, 2)

    def test_reset(self) -> None:
        """Test reset returns to identity."""
        t = Transform()
        t.translate(1, 2, 3)
        t.reset()
        assert t.m == make_identity_affine()

    def test_mult_transform(self) -> None:
        """Test self x other applies other first."""
        a = Transform()
        a.translate(1, 0, 0)
        b = Transform()
        b.scale(3, 3, 3)
        a.mult_transform(b)
        assert a.transform_point(Vec3(1, 0, 0)) == Vec3(4, 0, 0)

    def test_set_dcm_keeps_translation(self) -> None:
        """Test setting the axes leaves the translation alone."""
        t = Transform()
        t.translate(5, 6, 7)
        t.set_dcm(Vec3(0, 1, 0), Vec3(-1, 0, 0), Vec3(0, 0, 1))
        assert t.transform_point(Vec3(1, 0, 0)) == Vec3(5, 7, 7)

    def test_dup_is_independent(self) -> None:
        """Test a duplicate does not follow later changes."""
        t = Transform()
        d = t.dup()
        t.translate(1, 0, 0)
        assert d.m == make_identity_affine()


class TestRGBA:
    """Tests for RGBA colors."""

    def test_default_alpha(self) -> None:
        """Test colors are opaque by default."""
        assert RGBA(0.1, 0.2, 0.3).a == 1.0

    def test_set_rgb_makes_opaque(self) -> None:
        """Test set_rgb resets alpha."""
        c = RGBA(0, 0, 0, 0.5)
        c.set_rgb(1, 1, 1)
        assert c == RGBA(1, 1, 1, 1)

    def test_invert_keeps_alpha(self) -> None:
        """Test invert only touches the color channels."""
        c = RGBA(1.0, 0.25, 0.0, 0.5)
        c.invert()
        assert c == RGBA(0.0, 0.75, 1.0, 0.5)

    def test_dup_is_independent(self) -> None:
        """Test dup copies."""
        c = RGBA(1, 0, 0)
        d = c.dup()
        c.set_rgb(0, 1, 0)
        assert d == RGBA(1, 0, 0)

    def test_scaled(self) -> None:
        """Test scaling by lighting intensity keeps alpha."""
        assert RGBA(1.0, 0.5, 0.0, 0.8).scaled(0.5) == RGBA(0.5, 0.25, 0.0, 0.8)

    def test_to_bytes_clamps(self) -> None:
        """Test conversion to 8-bit channels."""
        assert RGBA(1.0, 0.5, 0.0, 1.0).to_bytes() == (255, 127, 0, 255)
        assert RGBA(2.0, -1.0, 0.0, 1.0).to_bytes() == (255, 0, 0, 255)


class TestQuadFace:
    """Tests for QuadFace."""

    @pytest.fixture
    def square(self) -> list[Vec3]:
        """Counter-clockwise square in the z = 0 plane."""
        return [Vec3(-1, -1, 0), Vec3(1, -1, 0), Vec3(1, 1, 0), Vec3(-1, 1, 0)]

    def test_triangle_detection(self) -> None:
        """Test a missing fourth index makes a triangle."""
        assert QuadFace(0, 1, 2).is_triangle()
        assert not QuadFace(0, 1, 2, 3).is_triangle()
        assert QuadFace(0, 1, 2).indices() == (0, 1, 2)

    def test_update_meta_quad(self, square: list[Vec3]) -> None:
        """Test centroid and normals of a quad."""
        qf = QuadFace(0, 1, 2, 3)
        qf.update_meta(square)
        assert qf.centroid == Vec3(0, 0, 0)
        assert qf.normal1 == Vec3(0, 0, 4)
        assert qf.normal2 == Vec3(0, 0, 4)

    def test_update_meta_triangle(self, square: list[Vec3]) -> None:
        """Test a triangle uses a 3 point centroid and equal normals."""
        qf = QuadFace(0, 1, 2)
        qf.update_meta(square)
        assert_vec3_close(qf.centroid, Vec3(1 / 3, -1 / 3, 0))
        assert qf.normal1 == qf.normal2

    def test_set_indices_clears_meta(self, square: list[Vec3]) -> None:
        """Test changing indices drops stale metadata."""
        qf = QuadFace(0, 1, 2, 3)
        qf.update_meta(square)
        qf.set_triangle(0, 1, 2)
        assert not qf.has_meta()
        assert qf.is_triangle()


class TestShape:
    """Tests for Shape metadata handling."""

    def test_new_shape_is_dirty(self) -> None:
        """Test metadata starts out stale."""
        assert Shape().meta_dirty

    def test_set_vertex_invalidates_and_ensure_rebuilds(self) -> None:
        """Test moving a vertex marks metadata stale until it is rebuilt."""
        s = Shape(
            vertices=[Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)],
            quads=[QuadFace(0, 1, 2)],
        ).rebuild_meta()
        assert not s.meta_dirty

        s.set_vertex(1, Vec3(2, 0, 0))
        assert s.meta_dirty

        s.ensure_meta()
        assert not s.meta_dirty
        assert s.quads[0].normal1 == Vec3(0, 0, 2)

    def test_ensure_meta_fills_missing_face_meta(self) -> None:
        """Test faces without metadata are rebuilt even if not marked dirty."""
        s = Shape(vertices=[Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)])
        s.rebuild_meta()
        s.quads.append(QuadFace(0, 1, 2))
        s.ensure_meta()
        assert s.quads[0].has_meta()


class TestPath:
    """Tests for Curve and Path."""

    def test_curve_kinds(self) -> None:
        """Test quadratic and cubic curves."""
        c = Curve(2, 1)
        assert c.is_quadratic()
        c.set_cubic(3, 1, 2)
        assert not c.is_quadratic()
        c.set_quadratic(3, 1)
        assert c.c1 is None

    def test_segments_start_at_origin(self) -> None:
        """Test a path without a starting point is traced from the origin."""
        path = Path(
            points=[Vec3(1, 0, 0), Vec3(2, 0, 0), Vec3(3, 0, 0)],
            curves=[Curve(1, 0), Curve(2, 1)],
        )
        starts = [start for start, _ in path.segments()]
        assert starts == [None, 1]

    def test_segments_with_starting_point(self) -> None:
        """Test tracing from an explicit starting point."""
        path = Path(points=[Vec3(0, 0, 0), Vec3(1, 0, 0)], curves=[Curve(1, 1, 1)], starting_point=0)
        assert [start for start, _ in path.segments()] == [0]


class TestSceneTypes:
    """Tests for Camera and TextureInfo."""

    def test_camera_defaults(self) -> None:
        """Test a fresh camera sits at the origin with focal length 1."""
        cam = Camera()
        assert cam.focal_length == 1.0
        assert cam.transform.m == make_identity_affine()

    def test_texture_uv(self) -> None:
        """Test per-corner uv lookup."""
        tex = TextureInfo(image=None, u0=0, v0=1, u1=2, v1=3, u2=4, v2=5, u3=6, v3=7)
        assert tex.uv(0) == (0, 1)
        assert tex.uv(3) == (6, 7)
