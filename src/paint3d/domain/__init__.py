"""Domain models for paint3d.

This module contains the value types and entities the renderer works on:
points and vectors, affine matrices and transforms, meshes, paths, the
camera, texture descriptions and colors.

- Points, vectors and matrices are immutable values
- Shapes, Paths, Transforms and colors are mutable, and owned by the caller
- Mesh topology is index based; faces never hold vertex objects

Key classes:
- Vec2 / Vec3: 2D and 3D points and vectors
- AffineMatrix: 3x4 affine matrix with implied [0, 0, 0, 1] last row
- Transform: Mutable wrapper composing AffineMatrix operations
- QuadFace / Shape: Quad or triangle faces over a shared vertex list
- Curve / Path: Quadratic or cubic bezier poly-curves
- Camera: World to camera transform plus focal length
- TextureInfo: Image handle plus per corner uv coordinates
- RGBA: Mutable color
"""

from paint3d.domain.color import RGBA
from paint3d.domain.matrix import AffineMatrix
from paint3d.domain.path import Curve, Path
from paint3d.domain.scene import Camera, TextureInfo
from paint3d.domain.shape import QuadFace, Shape
from paint3d.domain.transform import Transform
from paint3d.domain.vector import Vec2, Vec3

__all__: list[str] = [
    # Values
    "Vec2",
    "Vec3",
    "AffineMatrix",
    "RGBA",
    # Entities
    "Transform",
    "QuadFace",
    "Shape",
    "Curve",
    "Path",
    "Camera",
    "TextureInfo",
]
