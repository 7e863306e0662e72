"""Unit tests for the Pillow backed ImageSurface."""

import tempfile
from pathlib import Path

import pytest
from PIL import Image

from paint3d.config import SurfaceConfig
from paint3d.domain import RGBA
from paint3d.exceptions import SurfaceSaveError
from paint3d.render import ImageSurface

WHITE = (255, 255, 255, 255)
RED = RGBA(1.0, 0.0, 0.0, 1.0)
BLUE = RGBA(0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def surface() -> ImageSurface:
    """A 20x20 white surface."""
    return ImageSurface(20, 20, background=(1.0, 1.0, 1.0, 1.0))


class TestConstruction:
    """Tests for creating surfaces."""

    def test_background(self, surface: ImageSurface) -> None:
        """Test the background color fills the image."""
        assert (surface.width, surface.height) == (20, 20)
        assert surface.image.getpixel((5, 5)) == WHITE

    def test_transparent_by_default(self) -> None:
        """Test no background means transparent black."""
        assert ImageSurface(4, 4).image.getpixel((0, 0)) == (0, 0, 0, 0)

    def test_from_config(self) -> None:
        """Test sizes and stroke width come from the config."""
        surface = ImageSurface.from_config(SurfaceConfig(width=32, height=16, stroke_width=3))
        assert surface.image.size == (32, 16)
        assert surface.stroke_width == 3
        assert surface.image.getpixel((0, 0)) == WHITE


class TestPainting:
    """Tests for fills, strokes and rectangles."""

    def test_fill_rect(self, surface: ImageSurface) -> None:
        """Test fill_rect only covers its rectangle."""
        surface.fill_rect(0, 0, 10, 10, RED)
        assert surface.image.getpixel((5, 5)) == (255, 0, 0, 255)
        assert surface.image.getpixel((15, 15)) == WHITE

    def test_fill_triangle(self, surface: ImageSurface) -> None:
        """Test a filled path covers its inside only."""
        surface.begin_path()
        surface.move_to(0, 0)
        surface.line_to(20, 0)
        surface.line_to(0, 20)
        surface.close_path()
        surface.fill(BLUE)
        assert surface.image.getpixel((3, 3)) == (0, 0, 255, 255)
        assert surface.image.getpixel((17, 17)) == WHITE

    def test_fill_curve(self, surface: ImageSurface) -> None:
        """Test curved segments are flattened into the filled outline."""
        surface.begin_path()
        surface.move_to(0, 10)
        surface.bezier_curve_to(0, 0, 20, 0, 20, 10)
        surface.quadratic_curve_to(10, 20, 0, 10)
        surface.fill(BLUE)
        assert surface.image.getpixel((10, 10)) == (0, 0, 255, 255)
        assert surface.image.getpixel((1, 1)) == WHITE

    def test_stroke_line(self, surface: ImageSurface) -> None:
        """Test stroking an open path draws the line."""
        surface.begin_path()
        surface.move_to(0, 10)
        surface.line_to(20, 10)
        surface.stroke(RGBA(0.0, 0.0, 0.0, 1.0))
        assert surface.image.getpixel((10, 10)) == (0, 0, 0, 255)
        assert surface.image.getpixel((10, 5)) == WHITE

    def test_half_alpha_blends(self, surface: ImageSurface) -> None:
        """Test a translucent fill is blended over the background."""
        surface.fill_rect(0, 0, 20, 20, RGBA(0.0, 0.0, 0.0, 0.5))
        r, g, b, a = surface.image.getpixel((10, 10))
        assert 120 <= g <= 135
        assert a == 255

    def test_clear_rect(self, surface: ImageSurface) -> None:
        """Test clear_rect makes pixels transparent black."""
        surface.clear_rect(0, 0, 5, 5)
        assert surface.image.getpixel((2, 2)) == (0, 0, 0, 0)
        assert surface.image.getpixel((10, 10)) == WHITE

    def test_begin_path_discards_previous_path(self, surface: ImageSurface) -> None:
        """Test a new path does not include earlier subpaths."""
        surface.move_to(0, 0)
        surface.line_to(20, 0)
        surface.line_to(0, 20)
        surface.close_path()
        surface.begin_path()
        surface.fill(BLUE)
        assert surface.image.getpixel((3, 3)) == WHITE


class TestClipAndState:
    """Tests for clipping, transforms and save/restore."""

    def test_clip(self, surface: ImageSurface) -> None:
        """Test painting is limited to the clip region."""
        surface.begin_path()
        surface.move_to(0, 0)
        surface.line_to(10, 0)
        surface.line_to(10, 10)
        surface.line_to(0, 10)
        surface.close_path()
        surface.clip()
        surface.fill_rect(0, 0, 20, 20, RED)
        assert surface.image.getpixel((5, 5)) == (255, 0, 0, 255)
        assert surface.image.getpixel((15, 15)) == WHITE

    def test_restore_drops_clip(self, surface: ImageSurface) -> None:
        """Test restore brings back the unclipped state."""
        surface.save()
        surface.begin_path()
        surface.move_to(0, 0)
        surface.line_to(10, 0)
        surface.line_to(10, 10)
        surface.line_to(0, 10)
        surface.close_path()
        surface.clip()
        surface.restore()
        surface.fill_rect(0, 0, 20, 20, RED)
        assert surface.image.getpixel((15, 15)) == (255, 0, 0, 255)

    def test_restore_without_save(self, surface: ImageSurface) -> None:
        """Test an unmatched restore is ignored."""
        surface.restore()
        surface.fill_rect(0, 0, 5, 5, RED)
        assert surface.image.getpixel((2, 2)) == (255, 0, 0, 255)

    def test_transform_translates(self, surface: ImageSurface) -> None:
        """Test the current transform applies to later drawing."""
        surface.transform(1, 0, 0, 1, 10, 10)
        surface.fill_rect(0, 0, 5, 5, RED)
        assert surface.image.getpixel((12, 12)) == (255, 0, 0, 255)
        assert surface.image.getpixel((2, 2)) == WHITE

    def test_restore_transform(self, surface: ImageSurface) -> None:
        """Test save/restore brings back the previous transform."""
        surface.save()
        surface.transform(1, 0, 0, 1, 10, 10)
        surface.restore()
        surface.fill_rect(0, 0, 5, 5, RED)
        assert surface.image.getpixel((2, 2)) == (255, 0, 0, 255)
        assert surface.image.getpixel((12, 12)) == WHITE


class TestDrawImage:
    """Tests for draw_image."""

    def test_draw_at_origin(self) -> None:
        """Test an image is drawn at the origin with no transform."""
        surface = ImageSurface(20, 20)
        surface.draw_image(Image.new("RGBA", (4, 4), (0, 0, 255, 255)))
        assert surface.image.getpixel((1, 1)) == (0, 0, 255, 255)
        assert surface.image.getpixel((10, 10))[3] == 0

    def test_draw_translated(self) -> None:
        """Test the image follows the current transform."""
        surface = ImageSurface(20, 20)
        surface.transform(1, 0, 0, 1, 10, 10)
        surface.draw_image(Image.new("RGB", (4, 4), (0, 0, 255)))
        assert surface.image.getpixel((11, 11)) == (0, 0, 255, 255)
        assert surface.image.getpixel((1, 1))[3] == 0

    def test_draw_clipped(self) -> None:
        """Test the image is masked by the clip region."""
        surface = ImageSurface(20, 20)
        surface.begin_path()
        surface.move_to(0, 0)
        surface.line_to(10, 0)
        surface.line_to(10, 10)
        surface.line_to(0, 10)
        surface.close_path()
        surface.clip()
        surface.draw_image(Image.new("RGBA", (20, 20), (0, 0, 255, 255)))
        assert surface.image.getpixel((5, 5)) == (0, 0, 255, 255)
        assert surface.image.getpixel((15, 15))[3] == 0


class TestWrite:
    """Tests for writing images to disk."""

    def test_write_png(self, surface: ImageSurface) -> None:
        """Test the written file reopens with the same pixels."""
        surface.fill_rect(0, 0, 10, 10, RED)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.png"
            surface.write(path)
            assert path.exists()
            with Image.open(path) as im:
                assert im.size == (20, 20)
                assert im.convert("RGBA").getpixel((5, 5)) == (255, 0, 0, 255)

    def test_unknown_extension(self, surface: ImageSurface) -> None:
        """Test an unknown format is reported as SurfaceSaveError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.nosuchformat"
            with pytest.raises(SurfaceSaveError) as exc_info:
                surface.write(path)
            assert exc_info.value.path == str(path)

    def test_missing_directory(self, surface: ImageSurface) -> None:
        """Test an unwritable path is reported as SurfaceSaveError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "missing" / "out.png"
            with pytest.raises(SurfaceSaveError):
                surface.write(path)
