"""Utility functions for paint3d.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from paint3d.utils.logging import (
    FrameLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "FrameLogger",
    "RenderStats",
    "configure_logging",
]
