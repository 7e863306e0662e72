"""Face extrusion operator.

The Extruder pushes selected faces of a Shape out along their surface
normal, in one or more steps, optionally rotating and scaling the face as it
goes. Every step adds a ring of quad side faces; the original face is moved
to the end of the extrusion, so its index still identifies the outward cap.
"""

import logging
from collections.abc import Callable
from typing import cast

from paint3d.core.mesh import rebuild_meta
from paint3d.domain import QuadFace, Shape, Transform, Vec3
from paint3d.domain.vector import (
    add_points_3d,
    linear_interpolate,
    mul_point_3d,
    sub_points_3d,
    unit_vector_3d,
)

logger = logging.getLogger(__name__)

FaceSelector = Callable[[Shape, int], bool]


def _select_all(shape: Shape, quad_index: int) -> bool:  # noqa: ARG001
    return True


class Extruder:
    """Holds the extrusion parameters and performs the extrusion.

    Attributes:
        distance: Total distance to extrude. With count > 1 each step covers
            a portion and together they cover the whole distance.
        count: Number of steps. This differs from running extrude several
            times, since only the originally selected faces are extruded.
        scale: Scale reached by the last step, per axis
        rotate: Rotation in radians reached by the last step, per axis

    Example:
        extruder = Extruder(distance=0.5, count=3)
        extruder.select_custom(lambda shape, index: index == 0)
        extruder.extrude(shape)
    """

    def __init__(
        self,
        distance: float = 1.0,
        count: int = 1,
        scale: Vec3 | None = None,
        rotate: Vec3 | None = None,
    ) -> None:
        self.distance = distance
        self.count = count
        self.scale = scale if scale is not None else Vec3(1.0, 1.0, 1.0)
        self.rotate = rotate if rotate is not None else Vec3(0.0, 0.0, 0.0)
        self._selector: FaceSelector = _select_all

    def select_all(self) -> None:
        """Extrude every face."""
        self._selector = _select_all

    def select_custom(self, select_func: FaceSelector) -> None:
        """Extrude the faces for which select_func(shape, index) is True."""
        self._selector = select_func

    def selected_faces(self, shape: Shape) -> list[int]:
        return [i for i in range(len(shape.quads)) if self._selector(shape, i)]

    def extrude(self, shape: Shape) -> Shape:
        """Extrude the selected faces of shape in place.

        Args:
            shape: Shape to extrude, with valid or rebuildable metadata

        Returns:
            The same shape
        """
        shape.ensure_meta()

        distance = self.distance
        count = self.count
        rx, ry, rz = self.rotate.x, self.rotate.y, self.rotate.z
        sx, sy, sz = self.scale.x, self.scale.y, self.scale.z

        vertices = shape.vertices
        quads = shape.quads

        faces = self.selected_faces(shape)
        for face_index in faces:
            # Rewritten in place each step, so the next step connects back
            # to the previous step's vertices.
            qf = quads[face_index]
            # Metadata was ensured above.
            original_cent = cast(Vec3, qf.centroid)

            # Rotated, but never scaled.
            surface_normal = unit_vector_3d(
                add_points_3d(cast(Vec3, qf.normal1), cast(Vec3, qf.normal2))
            )

            is_triangle = qf.is_triangle()

            # From the centroid out to each corner.
            inner_normals = [sub_points_3d(vertices[i], original_cent) for i in qf.indices()]

            for z in range(count):
                m = (z + 1) / count

                t = Transform()
                t.rotate_x(rx * m)
                t.rotate_y(ry * m)
                t.rotate_z(rz * m)

                new_cent = add_points_3d(
                    original_cent,
                    mul_point_3d(t.transform_point(surface_normal), m * distance),
                )

                # The centroid offset is not scaled, only the corners are.
                t.scale_pre(
                    linear_interpolate(1, sx, m),
                    linear_interpolate(1, sy, m),
                    linear_interpolate(1, sz, m),
                )

                index_before = len(vertices)
                for inner in inner_normals:
                    vertices.append(add_points_3d(new_cent, t.transform_point(inner)))

                # Side faces are always quads, 3 or 4 of them.
                prev = qf.indices()
                n0, n1, n2 = index_before, index_before + 1, index_before + 2
                quads.append(QuadFace(prev[1], n1, n0, prev[0]))
                quads.append(QuadFace(prev[2], n2, n1, prev[1]))

                if is_triangle:
                    quads.append(QuadFace(prev[0], n0, n2, prev[2]))
                    qf.set_triangle(n0, n1, n2)
                else:
                    n3 = index_before + 3
                    quads.append(QuadFace(prev[3], n3, n2, prev[2]))
                    quads.append(QuadFace(prev[0], n0, n3, prev[3]))
                    qf.set_quad(n0, n1, n2, n3)

        logger.debug("Extruded %d faces in %d steps", len(faces), count)
        return rebuild_meta(shape)
