"""Command-line interface for paint3d.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render any built-in primitive to an image
- Mesh operators (extrude, subdivide, smooth, triangulate) from options
- Quiet mode and optional file logging
"""

from paint3d.cli.app import cli, main

__all__ = ["cli", "main"]
