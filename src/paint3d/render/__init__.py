"""Rendering of Shapes and Paths onto 2D drawing surfaces.

This module contains:

- Surface: the structural type any 2D drawing target must satisfy
- RecordingSurface: records drawing commands, for tests and replay
- ImageSurface: rasterizes into a Pillow RGBA image
- Renderer: buffers, culls, sorts, projects and draws faces
- Texture mapping of triangles through a solved affine transform
"""

from paint3d.render.pipeline import BufferedFace, QuadCallback, Renderer
from paint3d.render.raster import ImageSurface
from paint3d.render.surface import RecordingSurface, Surface
from paint3d.render.texture import draw_textured_triangle, solve_texture_affine

__all__ = [
    "BufferedFace",
    "ImageSurface",
    "QuadCallback",
    "RecordingSurface",
    "Renderer",
    "Surface",
    "draw_textured_triangle",
    "solve_texture_affine",
]
