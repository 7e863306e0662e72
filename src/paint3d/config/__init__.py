"""Configuration management for paint3d.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Render pipeline defaults (culling, sorting, overdraw)
- PathConfig: Path builder and curve flattening settings
- SurfaceConfig: Raster surface size and background
- LogLevel: Accepted log level names
- LoggingConfig: Logging settings
- Paint3DSettings: Main application settings
"""

from paint3d.config.settings import (
    LoggingConfig,
    LogLevel,
    Paint3DSettings,
    PathConfig,
    RenderConfig,
    SurfaceConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "Paint3DSettings",
    "PathConfig",
    "RenderConfig",
    "SurfaceConfig",
    "get_default_settings",
]
