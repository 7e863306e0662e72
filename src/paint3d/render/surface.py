"""The 2D drawing surface the renderer draws onto.

Any object with the methods of ``Surface`` can be rendered to. The operations
mirror an HTML canvas 2D context: build a path, then fill, stroke or clip
with it. Colors are passed explicitly to ``fill``/``stroke`` instead of being
held as surface state.
"""

from typing import Any, Protocol, runtime_checkable

from paint3d.domain import RGBA


@runtime_checkable
class Surface(Protocol):
    """Structural type of a 2D drawing surface."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, c0x: float, c0y: float, c1x: float, c1y: float, x: float, y: float
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, rgba: RGBA) -> None: ...

    def stroke(self, rgba: RGBA) -> None: ...

    def clip(self) -> None: ...

    def transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None: ...

    def draw_image(self, image: Any) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, rgba: RGBA) -> None: ...

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...


class RecordingSurface:
    """Surface that records all drawing commands it receives.

    Commands are stored as ``(operator, operands)`` tuples in ``.value``.
    Colors are recorded as 4-tuples so later changes to an RGBA object do not
    alter the recording.

    Example:
        surface = RecordingSurface(200, 100)
        surface.move_to(0, 0)
        surface.line_to(10, 10)
        surface.value
        # [('move_to', (0, 0)), ('line_to', (10, 10))]
    """

    def __init__(self, width: int = 640, height: int = 480) -> None:
        self._width = width
        self._height = height
        self.value: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _record(self, operator: str, *operands: Any) -> None:
        self.value.append((operator, operands))

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._record("quadratic_curve_to", cx, cy, x, y)

    def bezier_curve_to(
        self, c0x: float, c0y: float, c1x: float, c1y: float, x: float, y: float
    ) -> None:
        self._record("bezier_curve_to", c0x, c0y, c1x, c1y, x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, rgba: RGBA) -> None:
        self._record("fill", (rgba.r, rgba.g, rgba.b, rgba.a))

    def stroke(self, rgba: RGBA) -> None:
        self._record("stroke", (rgba.r, rgba.g, rgba.b, rgba.a))

    def clip(self) -> None:
        self._record("clip")

    def transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self._record("transform", a, b, c, d, e, f)

    def draw_image(self, image: Any) -> None:
        self._record("draw_image", image)

    def save(self) -> None:
        self._record("save")

    def restore(self) -> None:
        self._record("restore")

    def fill_rect(self, x: float, y: float, w: float, h: float, rgba: RGBA) -> None:
        self._record("fill_rect", x, y, w, h, (rgba.r, rgba.g, rgba.b, rgba.a))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("clear_rect", x, y, w, h)

    def operators(self) -> list[str]:
        """Return the recorded operator names, in order."""
        return [op for op, _ in self.value]

    def clear(self) -> None:
        self.value = []

    def replay(self, surface: Surface) -> None:
        """Replay the recorded commands onto another surface."""
        for operator, operands in self.value:
            if operator in ("fill", "stroke"):
                getattr(surface, operator)(RGBA(*operands[0]))
            elif operator == "fill_rect":
                x, y, w, h, color = operands
                surface.fill_rect(x, y, w, h, RGBA(*color))
            else:
                getattr(surface, operator)(*operands)
