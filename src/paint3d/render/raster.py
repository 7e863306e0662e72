"""Pillow backed raster surface.

ImageSurface implements the Surface operations on an RGBA Pillow image.
Path coordinates are mapped through the current transform when they are
added, like an HTML canvas. Curves are flattened into polylines, and fills,
strokes and images are blended through 8-bit coverage masks intersected with
the current clip mask.
"""

import logging
from pathlib import Path
from typing import Any

from fontTools.misc.transform import Identity
from fontTools.misc.transform import Transform as Affine2D
from PIL import Image, ImageChops, ImageDraw

from paint3d.config import SurfaceConfig
from paint3d.core._bezier import flatten_cubic, flatten_quadratic
from paint3d.domain import RGBA, Vec2
from paint3d.exceptions import SurfaceSaveError

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class ImageSurface:
    """A drawing surface rendering into a Pillow RGBA image.

    Example:
        surface = ImageSurface(320, 240)
        renderer = Renderer(surface)
        ...
        surface.write("frame.png")
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: tuple[float, float, float, float] | None = None,
        stroke_width: int = 1,
        tolerance: float = 0.25,
    ) -> None:
        fill = RGBA(*background).to_bytes() if background is not None else (0, 0, 0, 0)
        self._image = Image.new("RGBA", (width, height), fill)
        self.stroke_width = stroke_width
        self.tolerance = tolerance

        self._ctm: Affine2D = Identity
        self._clip: Image.Image | None = None
        self._state_stack: list[tuple[Affine2D, Image.Image | None]] = []

        # Subpaths in device coordinates; the bool marks closed subpaths.
        self._subpaths: list[tuple[list[Point], bool]] = []

    @classmethod
    def from_config(cls, config: SurfaceConfig, tolerance: float = 0.25) -> "ImageSurface":
        return cls(
            config.width,
            config.height,
            background=config.background,
            stroke_width=config.stroke_width,
            tolerance=tolerance,
        )

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        """The image drawn so far."""
        return self._image

    # Path construction

    def _device(self, x: float, y: float) -> Point:
        return self._ctm.transformPoint((x, y))

    def _current(self) -> list[Point]:
        if not self._subpaths:
            self._subpaths.append(([(0.0, 0.0)], False))
        return self._subpaths[-1][0]

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(([self._device(x, y)], False))

    def line_to(self, x: float, y: float) -> None:
        self._current().append(self._device(x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        points = self._current()
        p0 = Vec2(*points[-1])
        p1 = Vec2(*self._device(cx, cy))
        p2 = Vec2(*self._device(x, y))
        flat = flatten_quadratic([p0, p1, p2], self.tolerance)
        points.extend(p.to_tuple() for p in flat[1:])

    def bezier_curve_to(
        self, c0x: float, c0y: float, c1x: float, c1y: float, x: float, y: float
    ) -> None:
        points = self._current()
        p0 = Vec2(*points[-1])
        p1 = Vec2(*self._device(c0x, c0y))
        p2 = Vec2(*self._device(c1x, c1y))
        p3 = Vec2(*self._device(x, y))
        flat = flatten_cubic([p0, p1, p2, p3], self.tolerance)
        points.extend(p.to_tuple() for p in flat[1:])

    def close_path(self) -> None:
        if not self._subpaths:
            return
        points, _ = self._subpaths[-1]
        self._subpaths[-1] = (points, True)
        # Drawing continues from the start of the closed subpath.
        self._subpaths.append(([points[0]], False))

    # Masks and compositing

    def _new_mask(self) -> Image.Image:
        return Image.new("L", self._image.size, 0)

    def _fill_mask(self, value: int) -> Image.Image:
        mask = self._new_mask()
        draw = ImageDraw.Draw(mask)
        for points, _ in self._subpaths:
            if len(points) >= 3:
                draw.polygon(points, fill=value)
        return mask

    def _stroke_mask(self, value: int) -> Image.Image:
        mask = self._new_mask()
        draw = ImageDraw.Draw(mask)
        for points, closed in self._subpaths:
            if len(points) < 2:
                continue
            line = points + [points[0]] if closed else points
            draw.line(line, fill=value, width=self.stroke_width)
        return mask

    def _clipped(self, mask: Image.Image) -> Image.Image:
        if self._clip is None:
            return mask
        return ImageChops.multiply(mask, self._clip)

    def _paint(self, mask: Image.Image, rgba: RGBA) -> None:
        r, g, b, _ = rgba.to_bytes()
        layer = Image.new("RGBA", self._image.size, (r, g, b, 0))
        layer.putalpha(self._clipped(mask))
        self._image.alpha_composite(layer)

    @staticmethod
    def _coverage(rgba: RGBA) -> int:
        return rgba.to_bytes()[3]

    def fill(self, rgba: RGBA) -> None:
        self._paint(self._fill_mask(self._coverage(rgba)), rgba)

    def stroke(self, rgba: RGBA) -> None:
        self._paint(self._stroke_mask(self._coverage(rgba)), rgba)

    def clip(self) -> None:
        """Intersect the clip region with the current path."""
        mask = self._fill_mask(255)
        self._clip = self._clipped(mask)

    def _rect_mask(self, x: float, y: float, w: float, h: float, value: int) -> Image.Image:
        corners = [self._device(px, py) for px, py in ((x, y), (x + w, y), (x + w, y + h), (x, y + h))]
        mask = self._new_mask()
        ImageDraw.Draw(mask).polygon(corners, fill=value)
        return mask

    def fill_rect(self, x: float, y: float, w: float, h: float, rgba: RGBA) -> None:
        """Fill a rectangle without touching the current path."""
        self._paint(self._rect_mask(x, y, w, h, self._coverage(rgba)), rgba)

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Set the pixels of a rectangle to transparent black."""
        mask = self._clipped(self._rect_mask(x, y, w, h, 255))
        self._image.paste((0, 0, 0, 0), (0, 0), mask)

    # Transform and state

    def transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        """Multiply the current transform by (a, b, c, d, e, f).

        The new transform is applied to coordinates before the existing one.
        """
        self._ctm = self._ctm.transform((a, b, c, d, e, f))

    def save(self) -> None:
        """Push the current transform and clip region."""
        self._state_stack.append((self._ctm, self._clip))

    def restore(self) -> None:
        """Pop the transform and clip region. Does nothing if none was saved."""
        if self._state_stack:
            self._ctm, self._clip = self._state_stack.pop()

    def draw_image(self, image: Any) -> None:
        """Draw a Pillow image at the origin through the current transform."""
        source = image if image.mode == "RGBA" else image.convert("RGBA")
        # Pillow maps output pixels back to input pixels.
        inv = self._ctm.inverse()
        warped = source.transform(
            self._image.size,
            Image.Transform.AFFINE,
            (inv.xx, inv.yx, inv.dx, inv.xy, inv.yy, inv.dy),
            resample=Image.Resampling.BILINEAR,
        )
        if self._clip is not None:
            warped.putalpha(ImageChops.multiply(warped.getchannel("A"), self._clip))
        self._image.alpha_composite(warped)

    def write(self, path: str | Path) -> None:
        """Write the image to a file, format from the extension.

        Raises:
            SurfaceSaveError: If the file cannot be written
        """
        try:
            self._image.save(path)
        except (OSError, ValueError, KeyError) as e:
            raise SurfaceSaveError(str(path), str(e)) from e
        logger.info("Wrote %dx%d image to %s", self.width, self.height, path)
