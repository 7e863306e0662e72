"""Affine texture mapping of triangles.

A textured triangle is drawn by clipping to the destination triangle and
drawing the whole image through the affine transform that maps the three
source (u, v) points onto the three destination points.
"""

from collections.abc import Sequence
from typing import Any

from fontTools.misc.transform import Transform as Affine2D

from paint3d.domain import Vec2
from paint3d.render.surface import Surface


def solve_texture_affine(
    dst: Sequence[Vec2],
    src: Sequence[tuple[float, float]],
) -> Affine2D:
    """Solve for the affine transform mapping src onto dst.

    Args:
        dst: Three destination points on the surface
        src: Three (u, v) source points in image space

    Returns:
        2D affine transform in (xx, xy, yx, yy, dx, dy) order, the same
        order a surface ``transform`` call takes

    Raises:
        ZeroDivisionError: If the source points are collinear
    """
    x0, y0 = dst[0].x, dst[0].y
    x1, y1 = dst[1].x, dst[1].y
    x2, y2 = dst[2].x, dst[2].y
    sx0, sy0 = src[0]
    sx1, sy1 = src[1]
    sx2, sy2 = src[2]

    denom = sx0 * (sy2 - sy1) - sx1 * sy2 + sx2 * sy1 + (sx1 - sx2) * sy0

    m11 = -(sy0 * (x2 - x1) - sy1 * x2 + sy2 * x1 + (sy1 - sy2) * x0) / denom
    m12 = (sy1 * y2 + sy0 * (y1 - y2) - sy2 * y1 + (sy2 - sy1) * y0) / denom
    m21 = (sx0 * (x2 - x1) - sx1 * x2 + sx2 * x1 + (sx1 - sx2) * x0) / denom
    m22 = -(sx1 * y2 + sx0 * (y1 - y2) - sx2 * y1 + (sx2 - sx1) * y0) / denom
    dx = (sx0 * (sy2 * x1 - sy1 * x2) + sy0 * (sx1 * x2 - sx2 * x1) + (sx2 * sy1 - sx1 * sy2) * x0) / denom
    dy = (sx0 * (sy2 * y1 - sy1 * y2) + sy0 * (sx1 * y2 - sx2 * y1) + (sx2 * sy1 - sx1 * sy2) * y0) / denom

    return Affine2D(m11, m12, m21, m22, dx, dy)


def draw_textured_triangle(
    surface: Surface,
    image: Any,
    dst: Sequence[Vec2],
    src: Sequence[tuple[float, float]],
) -> None:
    """Draw the src triangle of image onto the dst triangle of surface.

    The surface state is saved before clipping and restored afterwards, so
    the clip and transform do not leak into later drawing.
    """
    surface.save()

    # Clip to the destination triangle.
    surface.begin_path()
    surface.move_to(dst[0].x, dst[0].y)
    surface.line_to(dst[1].x, dst[1].y)
    surface.line_to(dst[2].x, dst[2].y)
    surface.close_path()
    surface.clip()

    surface.transform(*solve_texture_affine(dst, src))

    # TODO: draw only the source bounding box instead of the whole image.
    surface.draw_image(image)
    surface.restore()
