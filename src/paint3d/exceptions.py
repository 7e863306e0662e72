"""Exception hierarchy for paint3d.

Numeric degeneracies (zero length vectors, collinear texture coordinates,
points at camera depth 0) are caller contract violations and are not
reported through these exceptions.
"""


class Paint3DError(Exception):
    """Base exception for all paint3d errors."""

    pass


class RenderError(Paint3DError):
    """Errors related to the render pipeline state."""

    pass


class TransformStackError(RenderError):
    """Transform stack popped while empty."""

    def __init__(self) -> None:
        super().__init__("Cannot pop transform: the transform stack is empty")


class ShapeError(Paint3DError):
    """Errors related to building shapes or paths."""

    pass


class UnknownPrimitiveError(ShapeError):
    """Requested primitive does not exist."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown primitive '{name}' (available: {', '.join(available)})"
        )


class SurfaceError(Paint3DError):
    """Errors related to drawing surfaces."""

    pass


class SurfaceSaveError(SurfaceError):
    """Error saving a rendered surface."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")
