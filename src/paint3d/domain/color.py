"""Simple RGBA color representation."""

from dataclasses import dataclass


@dataclass(slots=True)
class RGBA:
    """A mutable color with floating point channels.

    The r, g and b channels are normally in [0, 1]; a is the alpha.

    Attributes:
        r: Red channel
        g: Green channel
        b: Blue channel
        a: Alpha channel
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def set_rgba(self, r: float, g: float, b: float, a: float) -> None:
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def set_rgb(self, r: float, g: float, b: float) -> None:
        """Set the color channels, making the color fully opaque."""
        self.set_rgba(r, g, b, 1.0)

    def invert(self) -> None:
        """Invert the color channels in place. Alpha is kept."""
        self.r = 1 - self.r
        self.g = 1 - self.g
        self.b = 1 - self.b

    def dup(self) -> "RGBA":
        return RGBA(self.r, self.g, self.b, self.a)

    def scaled(self, intensity: float) -> "RGBA":
        """Return a copy with r, g and b multiplied by intensity."""
        return RGBA(self.r * intensity, self.g * intensity, self.b * intensity, self.a)

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Convert to 8-bit channels, clamped to [0, 255]."""
        return tuple(  # type: ignore[return-value]
            max(0, min(255, int(c * 255))) for c in (self.r, self.g, self.b, self.a)
        )

