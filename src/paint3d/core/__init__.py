"""Procedural construction and modification of Shapes and Paths.

This module contains:

- Mesh operators (metadata rebuild, triangulation, subdivision, smoothing)
- Primitive builders (plane, box, sphere, octahedron, surface graphs)
- The Extruder, a multi-step face extrusion operator
- Path builders (line, circle, spiral) and curve fitting

Operators mutate the Shape passed in and return it. Builders return new
objects with valid face metadata.

Key functions:
- rebuild_meta: Recompute face centroids and normals
- triangulate: Split quads into triangles
- linear_subdivide / linear_subdivide_tri: Split each face into 4
- average_smooth: Relax vertices toward neighbouring face centroids
- explode_faces: Give every face private vertices
- make_*: Primitive builders
- fit_quadratic_to_points: Quadratic control point through 3 points
"""

from paint3d.core.extrude import Extruder
from paint3d.core.mesh import (
    average_smooth,
    explode_faces,
    for_each_face,
    for_each_vertex,
    linear_subdivide,
    linear_subdivide_tri,
    rebuild_meta,
    triangulate,
)
from paint3d.core.paths import (
    CIRCLE_KAPPA,
    evaluate_curve,
    fit_quadratic_to_points,
    make_circle,
    make_line,
    make_spiral,
)
from paint3d.core.primitives import (
    SampleRange,
    func_to_data,
    make_box,
    make_box_with_hole,
    make_cube,
    make_graph,
    make_octahedron,
    make_plane,
    make_sphere,
    make_spherical_shape,
)

__all__ = [
    "CIRCLE_KAPPA",
    # Extrusion
    "Extruder",
    "SampleRange",
    # Mesh operators
    "average_smooth",
    "evaluate_curve",
    "explode_faces",
    "fit_quadratic_to_points",
    "for_each_face",
    "for_each_vertex",
    "func_to_data",
    "linear_subdivide",
    "linear_subdivide_tri",
    # Builders
    "make_box",
    "make_box_with_hole",
    "make_circle",
    "make_cube",
    "make_graph",
    "make_line",
    "make_octahedron",
    "make_plane",
    "make_sphere",
    "make_spherical_shape",
    "make_spiral",
    "rebuild_meta",
    "triangulate",
]
