"""Build and render the single-object scenes offered by the CLI."""

import logging
import math
from collections.abc import Callable

from pydantic import BaseModel, Field

from paint3d.config import Paint3DSettings
from paint3d.core import (
    Extruder,
    SampleRange,
    average_smooth,
    func_to_data,
    linear_subdivide,
    make_box,
    make_box_with_hole,
    make_circle,
    make_cube,
    make_graph,
    make_octahedron,
    make_plane,
    make_sphere,
    make_spiral,
    triangulate,
)
from paint3d.domain import RGBA, Path, Shape, Vec3
from paint3d.exceptions import UnknownPrimitiveError
from paint3d.render import Renderer, Surface
from paint3d.utils.logging import RenderStats

logger = logging.getLogger(__name__)


def _graph() -> Shape:
    r = SampleRange(min=-3.0, max=3.0, step=0.25)
    data = func_to_data(lambda x, z: math.sin(x) * math.cos(z), r, r)
    return make_graph(data, fac_x=2.0, fac_z=2.0, fac_y=0.5)


# name -> (description, builder)
PRIMITIVES: dict[str, tuple[str, Callable[[Paint3DSettings], Shape | Path]]] = {
    "cube": ("Cube of half size 1", lambda s: make_cube(1.0)),
    "box": ("Box of half sizes 1.5 x 1 x 0.5", lambda s: make_box(1.5, 1.0, 0.5)),
    "box-with-hole": (
        "Box with a square hole along z",
        lambda s: make_box_with_hole(1.0, 1.0, 0.5, 0.5, 0.5),
    ),
    "sphere": ("Sphere of radius 1.5", lambda s: make_sphere(1.5, 16, 12)),
    "octahedron": ("Unit octahedron", lambda s: make_octahedron()),
    "plane": (
        "Single square quad facing +z",
        lambda s: make_plane(
            Vec3(-1.0, -1.0, 0.0),
            Vec3(1.0, -1.0, 0.0),
            Vec3(1.0, 1.0, 0.0),
            Vec3(-1.0, 1.0, 0.0),
        ),
    ),
    "graph": ("Surface graph of sin(x) * cos(z)", lambda s: _graph()),
    "circle": ("Circle path of two cubic curves", lambda s: make_circle(s.path.circle_kappa)),
    "spiral": ("Spiral path of 5 rings", lambda s: make_spiral(5, s.path.circle_kappa)),
}


class SceneOptions(BaseModel):
    """How to build, modify and view a primitive."""

    rotate_x: float = 0.0
    rotate_y: float = 0.0
    rotate_z: float = 0.0
    distance: float = Field(default=5.0, ge=1.0)
    subdivide: int = Field(default=0, ge=0, le=5)
    smooth: float = Field(default=0.0, ge=0.0, le=1.0)
    extrude_count: int = Field(default=0, ge=0, le=32)
    extrude_distance: float = 0.5
    triangulate: bool = False
    stroke: bool = False
    fill: bool = True


def build_primitive(name: str, settings: Paint3DSettings) -> Shape | Path:
    """Build a primitive by name.

    Raises:
        UnknownPrimitiveError: If there is no primitive with that name
    """
    try:
        _, builder = PRIMITIVES[name]
    except KeyError:
        raise UnknownPrimitiveError(name, sorted(PRIMITIVES)) from None
    return builder(settings)


def apply_mesh_operators(shape: Shape, options: SceneOptions) -> Shape:
    """Run the requested mesh operators, in a fixed order."""
    if options.extrude_count > 0:
        Extruder(distance=options.extrude_distance, count=options.extrude_count).extrude(shape)
    for _ in range(options.subdivide):
        linear_subdivide(shape)
    if options.smooth > 0:
        average_smooth(shape, options.smooth)
    if options.triangulate:
        triangulate(shape)
    return shape


def render_scene(
    name: str,
    surface: Surface,
    settings: Paint3DSettings,
    options: SceneOptions,
) -> RenderStats:
    """Render one primitive centered in front of the camera.

    Returns:
        Statistics of the frame
    """
    obj = build_primitive(name, settings)

    renderer = Renderer(surface, settings)
    renderer.camera.transform.translate(0.0, 0.0, -options.distance)
    renderer.transform.rotate_x(options.rotate_x)
    renderer.transform.rotate_y(options.rotate_y)
    renderer.transform.rotate_z(options.rotate_z)

    renderer.draw_background()

    if isinstance(obj, Path):
        # Paths are traced from the origin; center the unit circle.
        renderer.transform.translate_pre(-0.5, 0.0, 0.0)
        renderer.stroke_rgba = RGBA(0.0, 0.0, 0.0, 1.0)
        renderer.fill_rgba = RGBA(1.0, 0.0, 0.0, 1.0)
        renderer.draw_path(obj, fill=options.fill and not options.stroke)
        return renderer.frame_logger.stats

    apply_mesh_operators(obj, options)

    if not options.fill:
        renderer.fill_rgba = None
    if options.stroke:
        renderer.stroke_rgba = RGBA(0.0, 0.0, 0.0, 1.0)

    renderer.buffer_shape(obj)
    renderer.draw_buffer()

    stats = renderer.frame_logger.stats
    logger.info(
        "Rendered %s: %d faces buffered, %d culled", name, stats.buffered, stats.culled
    )
    return stats
