"""Builders for basic mesh primitives.

Every builder returns a new Shape with its face metadata already built.
Faces are wound counter-clockwise when seen from the outside.
"""

import math
from collections.abc import Callable, Sequence

from pydantic import BaseModel, Field

from paint3d.core.mesh import average_smooth, rebuild_meta
from paint3d.domain import QuadFace, Shape, Vec3

SphericalFunction = Callable[[float, float], Vec3]


def make_plane(p1: Vec3, p2: Vec3, p3: Vec3, p4: Vec3) -> Shape:
    """Make a single quad from four corner points."""
    s = Shape(vertices=[p1, p2, p3, p4], quads=[QuadFace(0, 1, 2, 3)])
    return rebuild_meta(s)


def make_box(w: float, h: float, d: float) -> Shape:
    """Make a box centered on the origin.

    Args:
        w: Half width along x
        h: Half height along y
        d: Half depth along z

    Returns:
        Shape with 8 vertices and 6 quads
    """
    s = Shape()
    s.vertices = [
        Vec3(w, h, -d),  # 0
        Vec3(w, h, d),  # 1
        Vec3(w, -h, d),  # 2
        Vec3(w, -h, -d),  # 3
        Vec3(-w, h, -d),  # 4
        Vec3(-w, h, d),  # 5
        Vec3(-w, -h, d),  # 6
        Vec3(-w, -h, -d),  # 7
    ]

    #    4 -- 0
    #   /|   /|     +y
    #  5 -- 1 |      |__ +x
    #  | 7 -|-3     /
    #  |/   |/    +z
    #  6 -- 2

    s.quads = [
        QuadFace(0, 1, 2, 3),  # Right side
        QuadFace(1, 5, 6, 2),  # Front side
        QuadFace(5, 4, 7, 6),  # Left side
        QuadFace(4, 0, 3, 7),  # Back side
        QuadFace(0, 4, 5, 1),  # Top side
        QuadFace(2, 6, 7, 3),  # Bottom side
    ]

    return rebuild_meta(s)


def make_cube(whd: float) -> Shape:
    """Make a cube with half width, height and depth whd."""
    return make_box(whd, whd, whd)


def make_box_with_hole(w: float, h: float, d: float, hw: float, hh: float) -> Shape:
    """Make a box with a rectangular hole through it along the z axis.

    Args:
        w: Half width along x
        h: Half height along y
        d: Half depth along z
        hw: Half width of the hole
        hh: Half height of the hole

    Returns:
        Shape with 32 vertices and 32 quads
    """
    s = Shape()
    s.vertices = [
        Vec3(w, h, -d),  # 0
        Vec3(w, h, d),  # 1
        Vec3(w, -h, d),  # 2
        Vec3(w, -h, -d),  # 3
        Vec3(-w, h, -d),  # 4
        Vec3(-w, h, d),  # 5
        Vec3(-w, -h, d),  # 6
        Vec3(-w, -h, -d),  # 7
        # Front
        Vec3(hw, h, d),  # 8
        Vec3(w, hh, d),  # 9
        Vec3(hw, hh, d),  # 10
        Vec3(hw, -h, d),  # 11
        Vec3(w, -hh, d),  # 12
        Vec3(hw, -hh, d),  # 13
        Vec3(-hw, h, d),  # 14
        Vec3(-w, hh, d),  # 15
        Vec3(-hw, hh, d),  # 16
        Vec3(-hw, -h, d),  # 17
        Vec3(-w, -hh, d),  # 18
        Vec3(-hw, -hh, d),  # 19
        # Back
        Vec3(hw, h, -d),  # 20
        Vec3(w, hh, -d),  # 21
        Vec3(hw, hh, -d),  # 22
        Vec3(hw, -h, -d),  # 23
        Vec3(w, -hh, -d),  # 24
        Vec3(hw, -hh, -d),  # 25
        Vec3(-hw, h, -d),  # 26
        Vec3(-w, hh, -d),  # 27
        Vec3(-hw, hh, -d),  # 28
        Vec3(-hw, -h, -d),  # 29
        Vec3(-w, -hh, -d),  # 30
        Vec3(-hw, -hh, -d),  # 31
    ]

    #                        Front               Back (looking from front)
    #    4 -   - 0           05  14  08  01      04  26  20  00
    #   /|      /|
    #  5 -   - 1 |           15  16--10  09      27  28--22  21
    #  | 7 -   |-3               |////|              |////|
    #  |/      |/            18  19--13  12      30  31--25  24
    #  6 -   - 2
    #                        06  17  11  02      07  29  23  03

    faces = [
        # Front
        (1, 8, 10, 9), (8, 14, 16, 10), (14, 5, 15, 16), (16, 15, 18, 19),
        (19, 18, 6, 17), (13, 19, 17, 11), (12, 13, 11, 2), (9, 10, 13, 12),
        # Back
        (4, 26, 28, 27), (26, 20, 22, 28), (20, 0, 21, 22), (22, 21, 24, 25),
        (25, 24, 3, 23), (31, 25, 23, 29), (30, 31, 29, 7), (27, 28, 31, 30),
        # The hole
        (10, 16, 28, 22), (19, 31, 28, 16), (13, 25, 31, 19), (10, 22, 25, 13),
        # Bottom
        (6, 7, 29, 17), (17, 29, 23, 11), (11, 23, 3, 2),
        # Right
        (1, 9, 21, 0), (9, 12, 24, 21), (12, 2, 3, 24),
        # Left
        (5, 4, 27, 15), (15, 27, 30, 18), (18, 30, 7, 6),
        # Top
        (14, 26, 4, 5), (8, 20, 26, 14), (1, 0, 20, 8),
    ]
    s.quads = [QuadFace(*f) for f in faces]

    return rebuild_meta(s)


def make_spherical_shape(f: SphericalFunction, tess_x: int, tess_y: int) -> Shape:
    """Tessellate a spherical parametric function.

    The middle rows are built as a grid of quads. The zenith and nadir are
    single shared vertices joined to the first and last row by triangles.
    ``f(theta, phi)`` is sampled with theta in (0, pi) and phi in [0, 2pi).

    Args:
        f: Parametric function returning a point for (theta, phi)
        tess_x: Vertices around each ring (phi)
        tess_y: Number of rings between the poles (theta)

    Returns:
        Shape with tess_x * tess_y + 2 vertices
    """
    vertices: list[Vec3] = []
    quads: list[QuadFace] = []

    theta_step = math.pi / (tess_y + 1)
    phi_step = (2 * math.pi) / tess_x

    theta = theta_step
    for _ in range(tess_y):
        for j in range(tess_x):
            vertices.append(f(theta, phi_step * j))
        theta += theta_step

    for i in range(tess_y - 1):
        stride = i * tess_x
        for j in range(tess_x):
            n = (j + 1) % tess_x
            quads.append(
                QuadFace(stride + j, stride + tess_x + j, stride + tess_x + n, stride + n)
            )

    last_row = len(vertices) - tess_x
    top_p_i = len(vertices)
    bot_p_i = top_p_i + 1
    vertices.append(f(0.0, 0.0))
    vertices.append(f(math.pi, 0.0))

    for i in range(tess_x):
        quads.append(QuadFace(top_p_i, i, (i + 1) % tess_x))
        quads.append(
            QuadFace(bot_p_i, last_row + ((i + 2) % tess_x), last_row + ((i + 1) % tess_x))
        )

    return rebuild_meta(Shape(vertices=vertices, quads=quads))


def make_sphere(r: float, tess_x: int, tess_y: int) -> Shape:
    """Tessellate a sphere of radius r, centered on the origin.

    Standard spherical coordinates with {x, y, z} mapped to {z, x, y}, so the
    poles lie on the y axis.
    """

    def point(theta: float, phi: float) -> Vec3:
        return Vec3(
            r * math.sin(theta) * math.sin(phi),
            r * math.cos(theta),
            r * math.sin(theta) * math.cos(phi),
        )

    return make_spherical_shape(point, tess_x, tess_y)


def make_octahedron() -> Shape:
    """Make a unit octahedron of 8 triangles."""
    s = Shape()
    s.vertices = [
        Vec3(-1.0, 0.0, 0.0),  # 0
        Vec3(0.0, 0.0, 1.0),  # 1
        Vec3(1.0, 0.0, 0.0),  # 2
        Vec3(0.0, 0.0, -1.0),  # 3
        Vec3(0.0, 1.0, 0.0),  # 4
        Vec3(0.0, -1.0, 0.0),  # 5
    ]
    for i in range(4):
        i2 = (i + 1) & 3
        s.quads.append(QuadFace(4, i, i2))
        s.quads.append(QuadFace(i, 5, i2))

    return rebuild_meta(s)


class SampleRange(BaseModel):
    """Inclusive sampling range for func_to_data."""

    min: float
    max: float
    step: float = Field(gt=0)


def func_to_data(
    func: Callable[[float, float], float],
    x_range: SampleRange,
    z_range: SampleRange,
) -> list[list[float]]:
    """Sample y = func(x, z) over a grid.

    Returns:
        Rows of samples, one row per z value
    """
    data: list[list[float]] = []
    z = z_range.min
    while z <= z_range.max:
        row: list[float] = []
        x = x_range.min
        while x <= x_range.max:
            row.append(func(x, z))
            x += x_range.step
        data.append(row)
        z += z_range.step
    return data


def make_graph(
    data: Sequence[Sequence[float]],
    fac_x: float = 1.0,
    fac_z: float = 1.0,
    fac_y: float = 1.0,
) -> Shape:
    """Build a smoothed height field surface from sampled data.

    x and z are normalized to the grid size and scaled by fac_x and fac_z,
    y is normalized to the largest absolute sample and scaled by fac_y. Each
    grid cell gets two quads facing opposite ways, so the surface is visible
    from both sides.

    Args:
        data: Rows (z) of samples (x), as produced by func_to_data
        fac_x: Scale along x
        fac_z: Scale along z
        fac_y: Scale along y

    Returns:
        The surface shape
    """
    len_x = len(data[0])
    len_z = len(data)
    max_y = max(abs(v) for row in data for v in row) or 1.0

    s = Shape()
    for x in range(len_x):
        for z in range(len_z):
            s.vertices.append(
                Vec3(
                    (x - len_x / 2) / len_x * fac_x,
                    data[z][x] / max_y * fac_y,
                    (z - len_z / 2) / len_z * fac_z,
                )
            )

            if x >= 1 and z >= 1:
                prev = (x - 1) * len_z
                curr = x * len_z
                s.quads.append(QuadFace(prev + z - 1, prev + z, curr + z, curr + z - 1))
                s.quads.append(QuadFace(curr + z - 1, curr + z, prev + z, prev + z - 1))

    return average_smooth(s, 1.0)
