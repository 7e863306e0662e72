"""The render pipeline: buffer shapes, sort them, draw them.

A Renderer owns the render state (camera, object transform, colors,
texture and flags) and a draw buffer. ``buffer_shape`` transforms a shape
into camera space, culls faces behind the camera or facing away from it,
computes a flat lighting intensity and appends one entry per surviving face,
snapshotting the current render state. ``draw_buffer`` sorts the entries back
to front (painter's algorithm), projects them and draws them onto the
surface.

Drawing does not clear the buffered faces, so you can keep buffering and
drawing. Call ``empty_buffer`` to start fresh.

Colors are copied into each buffered entry, so changing a color after
buffering only affects shapes buffered later. Textures are held by
reference.
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from paint3d.config import Paint3DSettings, get_default_settings
from paint3d.domain import RGBA, Camera, Path, QuadFace, Shape, TextureInfo, Transform, Vec2, Vec3
from paint3d.domain.matrix import multiply_affine, trans_adjoint, transform_point, transform_points
from paint3d.domain.vector import (
    ORIGIN,
    Z_AXIS,
    add_points_3d,
    dot_product_3d,
    push_points_2d,
    unit_vector_3d,
)
from paint3d.exceptions import TransformStackError
from paint3d.render.surface import Surface
from paint3d.render.texture import draw_textured_triangle
from paint3d.utils.logging import FrameLogger

# Called for each face before it is buffered; returning True skips the face.
QuadCallback = Callable[[QuadFace, int, Shape], bool]

_BLACK = RGBA(0.0, 0.0, 0.0, 1.0)


@dataclass(slots=True)
class BufferedFace:
    """A face ready to be drawn, in camera space.

    Attributes:
        points: Camera space corner positions (3 or 4)
        centroid: Camera space centroid, the z-sort key
        normal1: Camera space unit normal of the first triangle
        normal2: Camera space normal of the second triangle (not normalized)
        intensity: Flat lighting intensity in [0, 1]
        draw_overdraw: Snapshot of the overdraw flag
        texture: Texture to draw, held by reference
        fill_rgba: Fill color snapshot
        stroke_rgba: Stroke color snapshot
        normal1_rgba: Color of the normal1 debug line
        normal2_rgba: Color of the normal2 debug line
    """

    points: tuple[Vec3, ...]
    centroid: Vec3
    normal1: Vec3
    normal2: Vec3
    intensity: float
    draw_overdraw: bool
    texture: TextureInfo | None
    fill_rgba: RGBA | None
    stroke_rgba: RGBA | None
    normal1_rgba: RGBA | None
    normal2_rgba: RGBA | None

    def is_triangle(self) -> bool:
        return len(self.points) == 3


def _snapshot(rgba: RGBA | None) -> RGBA | None:
    return rgba.dup() if rgba is not None else None


class Renderer:
    """Renders Shapes and Paths onto a 2D Surface.

    Example:
        renderer = Renderer(RecordingSurface(400, 400))
        renderer.camera.transform.translate(0, 0, -5)
        renderer.buffer_shape(make_cube(1))
        renderer.draw_buffer()
    """

    def __init__(self, surface: Surface, settings: Paint3DSettings | None = None) -> None:
        self.settings = settings or get_default_settings()
        render = self.settings.render

        self.surface = surface

        # Should we z-sort for painters back to front.
        self.perform_z_sorting = render.perform_z_sorting
        # Should we inflate faces to visually cover up antialiasing gaps.
        self.draw_overdraw = render.draw_overdraw
        # Should we skip backface culling.
        self.draw_backfaces = render.draw_backfaces

        self.texture: TextureInfo | None = None
        self.fill_rgba: RGBA | None = RGBA(1.0, 0.0, 0.0, 1.0)
        self.stroke_rgba: RGBA | None = None
        self.normal1_rgba: RGBA | None = None
        self.normal2_rgba: RGBA | None = None

        self.camera = Camera(focal_length=render.focal_length)
        # Object to world coordinates transformation.
        self.transform = Transform()
        self.quad_callback: QuadCallback | None = None

        self.frame_logger = FrameLogger()

        self._near_cull_z = render.near_cull_z
        self._overdraw_distance = render.overdraw_distance
        self._width = surface.width
        self._height = surface.height
        self._scale = self._height / 2
        self._xoff = self._width / 2

        # The current transform is always self.transform; the stack holds
        # the saved ones.
        self._transform_stack: list[Transform] = []
        self._buffered: list[BufferedFace] = []

    @property
    def buffered_faces(self) -> list[BufferedFace]:
        """The faces waiting to be drawn."""
        return self._buffered

    def push_transform(self) -> None:
        """Save a copy of the current object transform."""
        self._transform_stack.append(self.transform.dup())

    def pop_transform(self) -> None:
        """Restore the most recently pushed object transform.

        Raises:
            TransformStackError: If nothing was pushed
        """
        if not self._transform_stack:
            raise TransformStackError()
        self.transform = self._transform_stack.pop()

    def empty_buffer(self) -> None:
        self._buffered = []

    def project_point_to_surface(self, p: Vec3) -> Vec2:
        """Project a camera space point to surface pixel coordinates.

        We look down the negative z axis. The height maps to -1 .. 1 and the
        width keeps the aspect ratio. A point at z == 0 is not guarded
        against.
        """
        v = self.camera.focal_length / -p.z
        scale = self._scale
        return Vec2(p.x * v * scale + self._xoff, p.y * v * -scale + scale)

    def project_points_to_surface(self, ps: Sequence[Vec3]) -> list[Vec2]:
        return [self.project_point_to_surface(p) for p in ps]

    def buffer_shape(self, shape: Shape) -> int:
        """Put a shape into the draw buffer.

        The shape is transformed by the current object transform and camera,
        and the current render state is snapshotted into each entry.

        Args:
            shape: Shape to buffer; stale face metadata is rebuilt first

        Returns:
            Number of faces added to the buffer
        """
        shape.ensure_meta()

        draw_backfaces = self.draw_backfaces
        quad_callback = self.quad_callback
        near_cull_z = self._near_cull_z

        # Vertex transformation matrix, and the matching normal matrix.
        t = multiply_affine(self.camera.transform.m, self.transform.m)
        tn = trans_adjoint(t)

        camera_vertices = transform_points(t, shape.vertices)

        buffered = culled_near = culled_backface = skipped = 0

        for j, qf in enumerate(shape.quads):
            # The callback may change the render state per face, so the
            # state is read after calling it.
            if quad_callback is not None and quad_callback(qf, j, shape) is True:
                skipped += 1
                continue

            centroid = transform_point(t, qf.centroid)

            # Behind (or too close to) the camera.
            if centroid.z >= near_cull_z:
                culled_near += 1
                continue

            # tn does not keep vectors unit length.
            n1 = unit_vector_3d(transform_point(tn, qf.normal1))
            n2 = transform_point(tn, qf.normal2)

            # Both triangles of the face point away from the eye at the origin.
            if (
                not draw_backfaces
                and dot_product_3d(centroid, n1) > 0
                and dot_product_3d(centroid, n2) > 0
            ):
                culled_backface += 1
                continue

            intensity = max(0.0, dot_product_3d(Z_AXIS, n1))

            self._buffered.append(
                BufferedFace(
                    points=tuple(camera_vertices[i] for i in qf.indices()),
                    centroid=centroid,
                    normal1=n1,
                    normal2=n2,
                    intensity=intensity,
                    draw_overdraw=self.draw_overdraw,
                    texture=self.texture,
                    fill_rgba=_snapshot(self.fill_rgba),
                    stroke_rgba=_snapshot(self.stroke_rgba),
                    normal1_rgba=_snapshot(self.normal1_rgba),
                    normal2_rgba=_snapshot(self.normal2_rgba),
                )
            )
            buffered += 1

        self.frame_logger.log_shape_buffered(
            len(shape.quads), buffered, culled_near, culled_backface, skipped
        )
        return buffered

    def _overdraw(self, pts: list[Vec2]) -> list[Vec2]:
        # Each edge pushes its vertices away from each other, in order, each
        # push working on the already pushed points.
        distance = self._overdraw_distance
        n = len(pts)
        for a in range(n):
            b = (a + 1) % n
            pts[a], pts[b] = push_points_2d(pts[a], pts[b], distance)
        return pts

    def _face_path(self, pts: list[Vec2]) -> None:
        surface = self.surface
        surface.begin_path()
        surface.move_to(pts[0].x, pts[0].y)
        for p in pts[1:]:
            surface.line_to(p.x, p.y)

    def _normal_line(self, centroid: Vec3, normal: Vec3, rgba: RGBA) -> None:
        start = self.project_point_to_surface(centroid)
        end = self.project_point_to_surface(add_points_3d(centroid, unit_vector_3d(normal)))
        surface = self.surface
        surface.begin_path()
        surface.move_to(start.x, start.y)
        surface.line_to(end.x, end.y)
        surface.stroke(rgba)

    def draw_buffer(self) -> int:
        """Draw all buffered faces onto the surface.

        Returns:
            Number of faces drawn (the buffer size)
        """
        start_time = time.perf_counter()
        surface = self.surface
        faces = self._buffered

        # Looking down the negative z axis, the most negative z is painted
        # first.
        if self.perform_z_sorting:
            faces.sort(key=lambda f: f.centroid.z)

        for face in faces:
            pts = self.project_points_to_surface(face.points)
            if face.draw_overdraw:
                pts = self._overdraw(pts)

            # The path is left open unless it is stroked.
            self._face_path(pts)

            if face.fill_rgba is not None:
                surface.fill(face.fill_rgba.scaled(face.intensity))

            texture = face.texture
            if texture is not None:
                draw_textured_triangle(
                    surface,
                    texture.image,
                    (pts[0], pts[1], pts[2]),
                    (texture.uv(0), texture.uv(1), texture.uv(2)),
                )
                if not face.is_triangle():
                    draw_textured_triangle(
                        surface,
                        texture.image,
                        (pts[0], pts[2], pts[3]),
                        (texture.uv(0), texture.uv(2), texture.uv(3)),
                    )

            if face.stroke_rgba is not None:
                if texture is not None:
                    # Texturing replaced the current path with its clip path.
                    self._face_path(pts)
                surface.close_path()
                surface.stroke(face.stroke_rgba)

            if face.normal1_rgba is not None:
                self._normal_line(face.centroid, face.normal1, face.normal1_rgba)
            if face.normal2_rgba is not None:
                self._normal_line(face.centroid, face.normal2, face.normal2_rgba)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.frame_logger.log_buffer_drawn(len(faces), duration_ms)
        return len(faces)

    def draw_path(self, path: Path, fill: bool = False, rgba: RGBA | None = None) -> None:
        """Draw a Path immediately.

        Paths are not buffered, culled or z-sorted.

        Args:
            path: Path to draw
            fill: Fill the path instead of stroking it
            rgba: Paint color; defaults to the fill or stroke color of the
                render state, then opaque black
        """
        if rgba is None:
            rgba = self.fill_rgba if fill else self.stroke_rgba
        if rgba is None:
            rgba = _BLACK

        t = multiply_affine(self.camera.transform.m, self.transform.m)
        screen_points = self.project_points_to_surface(transform_points(t, path.points))

        # Start the path at (0, 0, 0) unless there is an explicit starting point.
        if path.starting_point is None:
            start = self.project_point_to_surface(transform_point(t, ORIGIN))
        else:
            start = screen_points[path.starting_point]

        surface = self.surface
        surface.begin_path()
        surface.move_to(start.x, start.y)

        for curve in path.curves:
            c0 = screen_points[curve.c0]
            ep = screen_points[curve.ep]
            if curve.c1 is None:
                surface.quadratic_curve_to(c0.x, c0.y, ep.x, ep.y)
            else:
                c1 = screen_points[curve.c1]
                surface.bezier_curve_to(c0.x, c0.y, c1.x, c1.y, ep.x, ep.y)

        if fill:
            surface.fill(rgba)
        else:
            surface.stroke(rgba)

        self.frame_logger.log_path_drawn(len(path.curves), fill)

    def draw_background(self, rgba: RGBA | None = None) -> None:
        """Paint the whole surface, by default with the configured background."""
        if rgba is None:
            rgba = RGBA(*self.settings.surface.background)
        self.surface.fill_rect(0, 0, self._width, self._height, rgba)

    def clear_background(self) -> None:
        """Clear the whole surface to transparent."""
        self.surface.clear_rect(0, 0, self._width, self._height)
