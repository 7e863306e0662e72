"""Path types: Curve and Path.

A Path is the QuadFace / Shape equivalent for 3D bezier paths. Curves store
indices into the point list of their Path.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from paint3d.domain.vector import Vec3


class Curve:
    """A quadratic or cubic bezier curve segment.

    The curve starts where the previous curve of the path ended. ``ep`` is
    the end point index, ``c0`` and ``c1`` are control point indices. A
    quadratic curve has ``c1`` set to None.
    """

    __slots__ = ("ep", "c0", "c1")

    def __init__(self, ep: int, c0: int, c1: int | None = None) -> None:
        self.ep = ep
        self.c0 = c0
        self.c1 = c1

    def __repr__(self) -> str:
        return f"Curve({self.ep}, {self.c0}, {self.c1})"

    def is_quadratic(self) -> bool:
        return self.c1 is None

    def set_quadratic(self, ep: int, c0: int) -> None:
        self.ep = ep
        self.c0 = c0
        self.c1 = None

    def set_cubic(self, ep: int, c0: int, c1: int) -> None:
        self.ep = ep
        self.c0 = c0
        self.c1 = c1


@dataclass
class Path:
    """A continuous poly-curve made of Curves.

    Tracing starts at ``points[starting_point]``, or at the origin
    (0, 0, 0) when ``starting_point`` is None, and continues along each curve,
    each one picking up where the last left off.

    Attributes:
        points: Point positions referenced by the curves
        curves: Curve segments in trace order
        starting_point: Optional index of the first point
    """

    points: list[Vec3] = field(default_factory=list)
    curves: list[Curve] = field(default_factory=list)
    starting_point: int | None = None

    def segments(self) -> Iterator[tuple[int | None, Curve]]:
        """Yield (start index, curve) pairs in trace order.

        A start index of None means the implicit origin.
        """
        start = self.starting_point
        for curve in self.curves:
            yield start, curve
            start = curve.ep
