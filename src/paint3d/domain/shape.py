"""Mesh types: QuadFace and Shape.

A Shape is an arena of vertices plus a list of faces that reference the
vertices by index. Vertices are shared between faces through their indices,
never through object aliasing.
"""

from dataclasses import dataclass, field

from paint3d.domain.vector import Vec3, average_points, cross_product, sub_points_3d


class QuadFace:
    """A four sided polygon, or a degenerate quad forming a triangle.

    Passing None as i3 indicates a triangle. The indices point into the
    vertex list of the owning Shape.

    Each face caches a centroid and two normals (one per triangle of the quad,
    split along the 0-2 diagonal). They are None until computed and are
    cleared whenever the face indices change.

    NOTE: The front of a QuadFace has its vertices in counter-clockwise order.
    """

    __slots__ = ("i0", "i1", "i2", "i3", "centroid", "normal1", "normal2")

    def __init__(self, i0: int, i1: int, i2: int, i3: int | None = None) -> None:
        self.i0 = i0
        self.i1 = i1
        self.i2 = i2
        self.i3 = i3

        self.centroid: Vec3 | None = None
        self.normal1: Vec3 | None = None
        self.normal2: Vec3 | None = None

    def __repr__(self) -> str:
        return f"QuadFace({self.i0}, {self.i1}, {self.i2}, {self.i3})"

    def is_triangle(self) -> bool:
        return self.i3 is None

    def has_meta(self) -> bool:
        return self.centroid is not None

    def indices(self) -> tuple[int, ...]:
        """Return the vertex indices of this face (3 or 4 of them)."""
        if self.i3 is None:
            return (self.i0, self.i1, self.i2)
        return (self.i0, self.i1, self.i2, self.i3)

    def set_quad(self, i0: int, i1: int, i2: int, i3: int) -> None:
        self.i0 = i0
        self.i1 = i1
        self.i2 = i2
        self.i3 = i3
        self.clear_meta()

    def set_triangle(self, i0: int, i1: int, i2: int) -> None:
        self.i0 = i0
        self.i1 = i1
        self.i2 = i2
        self.i3 = None
        self.clear_meta()

    def clear_meta(self) -> None:
        self.centroid = None
        self.normal1 = None
        self.normal2 = None

    def update_meta(self, vertices: list[Vec3]) -> None:
        """Recompute centroid and normals from the given vertex positions.

        Triangles get normal2 == normal1 and a 3 point centroid. Quads get
        normal1 from vertices (0, 1, 2), normal2 from (0, 2, 3) and a
        4 point centroid.

        Args:
            vertices: The vertex list the indices refer to
        """
        vert0 = vertices[self.i0]
        vert1 = vertices[self.i1]
        vert2 = vertices[self.i2]
        vec01 = sub_points_3d(vert1, vert0)
        vec02 = sub_points_3d(vert2, vert0)
        n1 = cross_product(vec01, vec02)

        if self.i3 is None:
            n2 = n1
            centroid = average_points((vert0, vert1, vert2))
        else:
            vert3 = vertices[self.i3]
            vec03 = sub_points_3d(vert3, vert0)
            n2 = cross_product(vec02, vec03)
            centroid = average_points((vert0, vert1, vert2, vert3))

        self.centroid = centroid
        self.normal1 = n1
        self.normal2 = n2


@dataclass
class Shape:
    """A mesh: a vertex arena and the faces indexing into it.

    All properties are public. Editing vertex positions through
    ``set_vertex`` (or calling ``invalidate_meta`` after editing the lists
    directly) marks the cached face metadata as stale; ``ensure_meta``
    recomputes it on demand.

    Attributes:
        vertices: 3D vertex positions
        quads: Faces, with indices into ``vertices``
        meta_dirty: True when cached face metadata may be stale
    """

    vertices: list[Vec3] = field(default_factory=list)
    quads: list[QuadFace] = field(default_factory=list)
    meta_dirty: bool = field(default=True, repr=False)

    def set_vertex(self, index: int, p: Vec3) -> None:
        """Move a vertex, invalidating the cached face metadata."""
        self.vertices[index] = p
        self.meta_dirty = True

    def invalidate_meta(self) -> None:
        self.meta_dirty = True

    def rebuild_meta(self) -> "Shape":
        """Recompute the centroid and normals of every face."""
        vertices = self.vertices
        for qf in self.quads:
            qf.update_meta(vertices)
        self.meta_dirty = False
        return self

    def ensure_meta(self) -> "Shape":
        """Rebuild metadata if it is stale or missing on any face."""
        if self.meta_dirty or not all(qf.has_meta() for qf in self.quads):
            self.rebuild_meta()
        return self
