"""Configuration settings for paint3d."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from paint3d.core.paths import CIRCLE_KAPPA


class RenderConfig(BaseModel):
    """Configuration for the render pipeline.

    These are the initial values of a Renderer's state; the flags remain
    plain attributes on the Renderer and can be changed per frame.
    """

    perform_z_sorting: bool = Field(
        default=True,
        description="Sort buffered faces back to front (painter's algorithm)",
    )
    draw_overdraw: bool = Field(
        default=True,
        description="Inflate projected faces to hide seams between neighbours",
    )
    draw_backfaces: bool = Field(
        default=False,
        description="Skip backface culling",
    )
    near_cull_z: float = Field(
        default=-1.0,
        le=0.0,
        description="Faces whose camera space centroid z is >= this are culled",
    )
    overdraw_distance: float = Field(
        default=1.0,
        ge=0.0,
        le=5.0,
        description="Distance in pixels each projected vertex is pushed by overdraw",
    )
    focal_length: float = Field(
        default=1.0,
        gt=0.0,
        description="Initial camera focal length",
    )


class PathConfig(BaseModel):
    """Configuration for path builders."""

    circle_kappa: float = Field(
        default=CIRCLE_KAPPA,
        ge=0.5,
        le=0.7,
        description="Control point offset for circles made of two cubic curves",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        ge=0.01,
        le=5.0,
        description="Max distance in pixels when flattening curves on raster surfaces",
    )


class SurfaceConfig(BaseModel):
    """Configuration for the raster drawing surface."""

    width: int = Field(default=640, ge=1, le=16384, description="Surface width in pixels")
    height: int = Field(default=480, ge=1, le=16384, description="Surface height in pixels")
    background: tuple[float, float, float, float] = Field(
        default=(1.0, 1.0, 1.0, 1.0),
        description="Background RGBA, channels in [0, 1]",
    )
    stroke_width: int = Field(default=1, ge=1, le=64, description="Stroke width in pixels")


class LogLevel(str, Enum):
    """Log levels accepted on the command line and in settings."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class Paint3DSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    path: PathConfig = Field(default_factory=PathConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Paint3DSettings:
    """Get default application settings."""
    return Paint3DSettings()
