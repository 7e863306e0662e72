"""Camera and texture descriptions consumed by the renderer."""

from dataclasses import dataclass, field
from typing import Any

from paint3d.domain.transform import Transform


@dataclass
class Camera:
    """A camera: a world to camera transform and a focal length.

    The camera looks down the negative z axis. A larger focal length means
    a stronger zoom.

    Attributes:
        transform: World to camera space transform
        focal_length: Projection strength, must be > 0
    """

    transform: Transform = field(default_factory=Transform)
    focal_length: float = 1.0


@dataclass
class TextureInfo:
    """Describes how a face should be textured.

    ``image`` is an opaque handle the drawing surface knows how to draw
    (for ImageSurface, a PIL image). The (u, v) pairs are source image
    coordinates, one per destination face corner.
    """

    image: Any = None
    u0: float = 0.0
    v0: float = 0.0
    u1: float = 0.0
    v1: float = 0.0
    u2: float = 0.0
    v2: float = 0.0
    u3: float = 0.0
    v3: float = 0.0

    def uv(self, corner: int) -> tuple[float, float]:
        """Return the (u, v) pair for face corner 0-3."""
        return (
            (self.u0, self.v0),
            (self.u1, self.v1),
            (self.u2, self.v2),
            (self.u3, self.v3),
        )[corner]
