"""Unit tests for face extrusion."""

import math

import pytest

from paint3d.core.extrude import Extruder
from paint3d.core.primitives import make_cube, make_octahedron
from paint3d.domain import Vec3
from paint3d.domain.vector import dot_product_3d


class TestExtruder:
    """Tests for Extruder."""

    def test_select_all_by_default(self) -> None:
        """Test a new extruder selects every face."""
        assert Extruder().selected_faces(make_cube(1.0)) == [0, 1, 2, 3, 4, 5]

    def test_select_custom(self) -> None:
        """Test a custom selector picks faces by index."""
        e = Extruder()
        e.select_custom(lambda shape, i: i % 2 == 0)
        assert e.selected_faces(make_cube(1.0)) == [0, 2, 4]
        e.select_all()
        assert len(e.selected_faces(make_cube(1.0))) == 6

    def test_single_face_three_steps(self) -> None:
        """Test 4 side quads per step plus the original 6 faces."""
        s = make_cube(1.0)
        e = Extruder(distance=1.0, count=3)
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        assert len(s.quads) == 6 + 3 * 4
        assert len(s.vertices) == 8 + 3 * 4
        assert all(not qf.is_triangle() for qf in s.quads)

    def test_cap_moves_out_along_normal(self) -> None:
        """Test the selected face ends up as the cap at the full distance."""
        s = make_cube(1.0)
        e = Extruder(distance=1.0, count=3)
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        cap = s.quads[0]
        assert cap.indices() == (16, 17, 18, 19)
        assert cap.centroid is not None and cap.normal1 is not None
        assert cap.centroid.x == pytest.approx(2.0)
        assert cap.centroid.y == pytest.approx(0.0)
        assert cap.centroid.z == pytest.approx(0.0)
        assert cap.normal1.x > 0

    def test_side_faces_face_outward(self) -> None:
        """Test side walls point away from the extrusion axis."""
        s = make_cube(1.0)
        e = Extruder(distance=2.0, count=1)
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        for qf in s.quads[6:]:
            assert qf.centroid is not None and qf.normal1 is not None
            radial = Vec3(0.0, qf.centroid.y, qf.centroid.z)
            assert dot_product_3d(radial, qf.normal1) > 0

    def test_scale_shrinks_cap(self) -> None:
        """Test the final step reaches the requested scale."""
        s = make_cube(1.0)
        e = Extruder(distance=1.0, count=2, scale=Vec3(0.5, 0.5, 0.5))
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        for i in s.quads[0].indices():
            v = s.vertices[i]
            assert abs(v.y) == pytest.approx(0.5)
            assert abs(v.z) == pytest.approx(0.5)

    def test_rotate_cap(self) -> None:
        """Test rotating about the extrusion axis keeps the cap centroid."""
        s = make_cube(1.0)
        e = Extruder(distance=1.0, count=1, rotate=Vec3(math.pi / 4, 0.0, 0.0))
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        cap = s.quads[0]
        assert cap.centroid is not None
        assert cap.centroid.x == pytest.approx(2.0)
        corner = s.vertices[cap.i0]
        assert math.hypot(corner.y, corner.z) == pytest.approx(math.sqrt(2))

    def test_triangle_face(self) -> None:
        """Test a triangle gets 3 side quads per step and stays a triangle."""
        s = make_octahedron()
        e = Extruder(distance=0.5, count=2)
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        assert len(s.quads) == 8 + 2 * 3
        assert len(s.vertices) == 6 + 2 * 3
        assert s.quads[0].is_triangle()

    def test_extrude_all_faces(self) -> None:
        """Test every face of a cube extruded once."""
        s = make_cube(1.0)
        Extruder(distance=0.5, count=1).extrude(s)
        assert len(s.quads) == 6 + 6 * 4
        assert not s.meta_dirty

    def test_side_face_indices_quad(self) -> None:
        """Test side walls join each old edge to its new edge."""
        s = make_cube(1.0)
        e = Extruder(distance=1.0, count=1)
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        assert [qf.indices() for qf in s.quads[6:]] == [
            (1, 9, 8, 0),
            (2, 10, 9, 1),
            (3, 11, 10, 2),
            (0, 8, 11, 3),
        ]
        assert s.quads[0].indices() == (8, 9, 10, 11)

    def test_side_face_indices_triangle(self) -> None:
        """Test a triangle gets three side walls and a triangular cap."""
        s = make_octahedron()
        a, b, c = s.quads[0].indices()
        e = Extruder(distance=0.5, count=1)
        e.select_custom(lambda shape, i: i == 0)
        e.extrude(s)

        assert [qf.indices() for qf in s.quads[8:]] == [
            (b, 7, 6, a),
            (c, 8, 7, b),
            (a, 6, 8, c),
        ]
        assert s.quads[0].indices() == (6, 7, 8)
