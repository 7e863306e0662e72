"""Procedural mesh operators.

All operators mutate the given Shape in place and return it, so calls can be
chained. Every operator leaves the face metadata rebuilt.

The operations follow demoscene style procedural modelling: subdivide,
smooth, triangulate and explode operate on whole meshes at once.
"""

import logging
from collections.abc import Callable

from paint3d.domain import QuadFace, Shape, Vec3
from paint3d.domain.vector import average_points, linear_interpolate_points_3d

logger = logging.getLogger(__name__)

FaceCallback = Callable[[QuadFace, int, Shape], bool | None]
VertexCallback = Callable[[Vec3, int, Shape], bool | None]


def rebuild_meta(shape: Shape) -> Shape:
    """Rebuild the pre-computed face metadata of a shape.

    Calculates the centroid and both normals of every face from the current
    vertex positions. Must be called after editing vertex positions directly,
    before rendering or running another operator that reads the metadata.

    Args:
        shape: Shape to update

    Returns:
        The same shape
    """
    return shape.rebuild_meta()


def triangulate(shape: Shape) -> Shape:
    """Convert every quad face into two triangle faces.

    The quad keeps the (i0, i1, i2) half and a new triangle (i0, i2, i3) is
    appended. Shapes without quads are left unchanged.

    Args:
        shape: Shape to triangulate

    Returns:
        The same shape, consisting only of triangles
    """
    quads = shape.quads
    for i in range(len(quads)):
        qf = quads[i]
        if qf.i3 is None:
            continue

        quads.append(QuadFace(qf.i0, qf.i2, qf.i3, None))
        qf.set_triangle(qf.i0, qf.i1, qf.i2)

    return rebuild_meta(shape)


def for_each_face(shape: Shape, func: FaceCallback) -> Shape:
    """Call func(face, index, shape) for each face.

    The callback returns True to stop the iteration early.
    """
    for i, qf in enumerate(shape.quads):
        if func(qf, i, shape) is True:
            break
    return shape


def for_each_vertex(shape: Shape, func: VertexCallback) -> Shape:
    """Call func(vertex, index, shape) for each vertex.

    The callback returns True to stop the iteration early.
    """
    for i, vertex in enumerate(shape.vertices):
        if func(vertex, i, shape) is True:
            break
    return shape


def average_smooth(shape: Shape, amount: float = 1.0) -> Shape:
    """Smooth a shape by averaging the vertices with their faces.

    This is something like Catmull-Clark without the proper weighting. Every
    vertex moves toward the average of the centroids of the faces it belongs
    to. All vertices are computed from the positions before smoothing.

    A vertex that no face references has nothing to average and makes the
    division fail.

    Args:
        shape: Shape to smooth
        amount: Between 0 (no change) and 1 (fully averaged)

    Returns:
        The same shape
    """
    vertices = shape.vertices

    # Connection mapping of vertex index -> [face indices]
    connections: list[list[int]] = [[] for _ in vertices]
    for i, qf in enumerate(shape.quads):
        for index in qf.indices():
            connections[index].append(i)

    centroids = [average_points(vertices[j] for j in qf.indices()) for qf in shape.quads]

    new_vertices: list[Vec3] = []
    for i, faces in enumerate(connections):
        avg = average_points(centroids[j] for j in faces)
        new_vertices.append(linear_interpolate_points_3d(vertices[i], avg, amount))

    shape.vertices = new_vertices
    return rebuild_meta(shape)


def _shared_vertex(shape: Shape, shared: dict[tuple[int, ...], int], indices: tuple[int, ...]) -> int:
    """Return the index of the averaged vertex for the given source indices.

    Vertices are cached on the sorted index tuple so neighbouring faces reuse
    the same new vertex instead of creating two on top of each other.
    """
    key = tuple(sorted(indices))
    index = shared.get(key)
    if index is None:
        index = len(shape.vertices)
        shape.vertices.append(average_points(shape.vertices[j] for j in key))
        shared[key] = index
    return index


def _subdivide_quad(shape: Shape, face_index: int, shared: dict[tuple[int, ...], int]) -> None:
    qf = shape.quads[face_index]
    i0, i1, i2, i3 = qf.indices()

    #  p0   p1      p0  n0  p1
    #           ->  n3  n4  n1
    #  p3   p2      p3  n2  p2
    n0 = _shared_vertex(shape, shared, (i0, i1))
    n1 = _shared_vertex(shape, shared, (i1, i2))
    n2 = _shared_vertex(shape, shared, (i2, i3))
    n3 = _shared_vertex(shape, shared, (i3, i0))
    n4 = _shared_vertex(shape, shared, (i0, i1, i2, i3))

    shape.quads[face_index] = QuadFace(i0, n0, n4, n3)
    shape.quads.append(QuadFace(n0, i1, n1, n4))
    shape.quads.append(QuadFace(n4, n1, i2, n2))
    shape.quads.append(QuadFace(n3, n4, n2, i3))


def _subdivide_triangle(shape: Shape, face_index: int, shared: dict[tuple[int, ...], int]) -> None:
    tri = shape.quads[face_index]
    i0, i1, i2 = tri.i0, tri.i1, tri.i2

    #     p0                 p0
    #              ->      n0  n2
    # p1      p2         p1  n1  p2
    n0 = _shared_vertex(shape, shared, (i0, i1))
    n1 = _shared_vertex(shape, shared, (i1, i2))
    n2 = _shared_vertex(shape, shared, (i2, i0))

    shape.quads[face_index] = QuadFace(i0, n0, n2)
    shape.quads.append(QuadFace(n0, i1, n1))
    shape.quads.append(QuadFace(n2, n1, i2))
    shape.quads.append(QuadFace(n0, n1, n2))


def linear_subdivide(shape: Shape) -> Shape:
    """Divide each face of a shape into 4 new faces.

    Quads get a vertex at each edge midpoint plus one at the centroid, and
    are replaced by 4 quads. Triangles are split as in
    ``linear_subdivide_tri``. Edge vertices are shared between neighbouring
    faces.

    Args:
        shape: Shape to subdivide

    Returns:
        The same shape, with 4 times as many faces
    """
    shared: dict[tuple[int, ...], int] = {}
    for i in range(len(shape.quads)):
        if shape.quads[i].is_triangle():
            _subdivide_triangle(shape, i, shared)
        else:
            _subdivide_quad(shape, i, shared)

    logger.debug(
        "Subdivided shape: %d faces, %d vertices", len(shape.quads), len(shape.vertices)
    )
    return rebuild_meta(shape)


def linear_subdivide_tri(shape: Shape) -> Shape:
    """Divide each triangle of a shape into 4 new triangles.

    The midpoint of each edge is taken, inscribing an upside-down triangle
    within the original, which defines the 4 new triangles. Only the first
    three indices of each face are used.

    Args:
        shape: Shape of triangles to subdivide

    Returns:
        The same shape, with 4 times as many faces
    """
    shared: dict[tuple[int, ...], int] = {}
    for i in range(len(shape.quads)):
        _subdivide_triangle(shape, i, shared)

    return rebuild_meta(shape)


def explode_faces(shape: Shape) -> Shape:
    """Detach all of the faces from each other.

    Every face gets a private copy of its corner vertices, so no vertex is
    shared across faces.

    Args:
        shape: Shape to explode

    Returns:
        The same shape
    """
    verts = shape.vertices
    new_verts: list[Vec3] = []
    for qf in shape.quads:
        pos = len(new_verts)
        new_verts.extend(verts[i] for i in qf.indices())
        if qf.is_triangle():
            qf.set_triangle(pos, pos + 1, pos + 2)
        else:
            qf.set_quad(pos, pos + 1, pos + 2, pos + 3)

    shape.vertices = new_verts
    return rebuild_meta(shape)
